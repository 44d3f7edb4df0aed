"""
Game controller for Minesweeper.

Turns player intents (reveal, toggle flag, chord, new game) into engine
actions. It owns the mine layout, so the same layout is passed to every
action of a game and a new one is generated whenever the board resets.
"""
import logging
from typing import Optional

import numpy as np

from .actions import Flag, LoseGame, Reset, RevealCell, Unflag
from .board import BoardConfig, BoardState, GamePhase
from .cell import CellValue
from .display import display_caption, render_text
from .engine import Engine, chord_targets
from .mines import MineLayout, generate

logger = logging.getLogger(__name__)


class Game:
    """
    A single-player game session.

    Player actions return True when they changed the board and False
    when they were ignored, e.g. clicking a flagged cell or playing on
    after the game ended.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        layout: Optional[MineLayout] = None,
    ) -> None:
        """
        Initialize a game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            layout: Fixed mine layout matching config; generated from
                config.seed when omitted.
        """
        self.config = config or BoardConfig()
        self._rng = np.random.default_rng(self.config.seed)
        self._engine = Engine(self.config)
        if layout is None:
            layout = self._generate_layout()
        self._check_layout(layout)
        self._layout = layout

    # ========================================================================
    # Setup (Low-level)
    # ========================================================================

    def _generate_layout(self) -> MineLayout:
        return generate(
            self.config.height,
            self.config.width,
            self.config.mine_amount,
            rng=self._rng,
        )

    def _check_layout(self, layout: MineLayout) -> None:
        if (layout.width, layout.height) != (self.config.width, self.config.height):
            raise ValueError("Mine layout does not match board dimensions")
        if len(layout) != self.config.mine_amount:
            raise ValueError(
                f"Mine layout has {len(layout)} mines, "
                f"config expects {self.config.mine_amount}"
            )

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at position, as a left click would.

        Clicking a mine loses the game. Flagged and already revealed
        cells are left alone.

        Raises:
            InvalidCoordinate: If position is outside the board.
        """
        value = self.state.cell(x, y)
        if not self.is_playing or value != CellValue.COVERED:
            return False

        if self._layout.contains(x, y):
            self._engine.dispatch(LoseGame(x, y, self._layout))
        else:
            self._engine.dispatch(RevealCell([(x, y)], self._layout))
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag a covered cell or unflag a flagged one, as a right click would.

        Raises:
            InvalidCoordinate: If position is outside the board.
        """
        value = self.state.cell(x, y)
        if not self.is_playing:
            return False
        if value == CellValue.COVERED:
            self._engine.dispatch(Flag(x, y))
        elif value == CellValue.FLAG:
            self._engine.dispatch(Unflag(x, y))
        else:
            return False
        return True

    def chord(self, x: int, y: int) -> bool:
        """
        Reveal all unflagged neighbors of a satisfied number.

        If a flag around the number is wrong, one of the revealed
        neighbors is a mine and the game is lost on it.

        Raises:
            InvalidCoordinate: If position is outside the board.
        """
        targets = chord_targets(self.state, x, y)
        if not self.is_playing or not targets:
            return False

        for target in targets:
            if self._layout.contains(target.x, target.y):
                self._engine.dispatch(LoseGame(target.x, target.y, self._layout))
                return True

        self._engine.dispatch(RevealCell(targets, self._layout))
        return True

    def new_game(self, config: Optional[BoardConfig] = None) -> BoardState:
        """
        Start a new game, optionally with a different configuration.

        The new layout is generated before the board is reset, so a
        failure leaves the current game untouched.
        """
        if config is not None:
            self.config = config
            self._rng = np.random.default_rng(config.seed)
        layout = self._generate_layout()
        state = self._engine.dispatch(
            Reset(self.config.height, self.config.width, self.config.mine_amount)
        )
        self._layout = layout
        logger.info(
            "new %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.mine_amount,
        )
        return state

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def state(self) -> BoardState:
        """Get current board state."""
        return self._engine.state

    @property
    def layout(self) -> MineLayout:
        """Get the mine layout of the current game."""
        return self._layout

    @property
    def phase(self) -> GamePhase:
        """Get current game phase."""
        return self._engine.phase

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.phase == GamePhase.PENDING

    @property
    def caption(self) -> str:
        """Get the caption for the current phase."""
        return display_caption(self.phase)

    def render(self, coordinates: bool = False) -> str:
        """Render the board as ASCII."""
        return render_text(self.state, coordinates=coordinates)
