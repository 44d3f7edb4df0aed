"""
Board module for Minesweeper game.

Holds the board configuration and the aggregate state the engine
transitions between: the grid of cell values, the running counters
that drive win detection, the game phase and the flag set.
"""
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import FrozenSet, List, Optional

import numpy as np

from .adjacency import Coordinate, in_bounds
from .cell import CellValue
from .errors import InvalidCoordinate, InvariantViolation


Grid = List[List[CellValue]]


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible outcomes of a game."""

    PENDING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if the game is over."""
        return self is not GamePhase.PENDING


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        mine_amount: Total mines to place.
        seed: Seed for mine placement, None for a random board.
    """

    height: int = 9
    width: int = 9
    mine_amount: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_amount < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.mine_amount > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# ============================================================================
# Board State
# ============================================================================

def build_grid(height: int, width: int) -> Grid:
    """Create a grid with every cell covered."""
    return [[CellValue.COVERED for _ in range(width)] for _ in range(height)]


@dataclass
class BoardState:
    """
    Snapshot of a game in progress.

    Attributes:
        grid: Cell values indexed as grid[y][x].
        covered_count: Cells still plainly covered. Flagging a cell
            takes it out of this count, unflagging puts it back.
        remaining_count: Mines minus flags placed.
        phase: Current game outcome.
        flagged_coordinates: Positions currently flagged.
        width: Number of columns.
        height: Number of rows.
        mine_amount: Mines hidden on the board.
    """

    grid: Grid
    covered_count: int
    remaining_count: int
    phase: GamePhase = GamePhase.PENDING
    flagged_coordinates: FrozenSet[Coordinate] = field(default_factory=frozenset)
    width: int = 0
    height: int = 0
    mine_amount: int = 0

    @classmethod
    def initial(cls, height: int, width: int, mine_amount: int) -> "BoardState":
        """Create the state of a fresh, untouched board."""
        config = BoardConfig(height, width, mine_amount)
        return cls(
            grid=build_grid(config.height, config.width),
            covered_count=config.height * config.width,
            remaining_count=config.mine_amount,
            width=config.width,
            height=config.height,
            mine_amount=config.mine_amount,
        )

    def copy(self) -> "BoardState":
        """Return a copy whose grid can be changed independently."""
        return replace(self, grid=[list(row) for row in self.grid])

    def require_in_bounds(self, x: int, y: int) -> None:
        """Raise InvalidCoordinate if position is off the board."""
        if not in_bounds(x, y, self.width, self.height):
            raise InvalidCoordinate(x, y, self.width, self.height)

    def cell(self, x: int, y: int) -> CellValue:
        """Get the value at position."""
        self.require_in_bounds(x, y)
        return self.grid[y][x]

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.phase == GamePhase.PENDING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.phase == GamePhase.LOST

    def covered_cells(self) -> List[Coordinate]:
        """List positions that are covered and not flagged."""
        return [
            Coordinate(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.grid[y][x] == CellValue.COVERED
        ]

    def to_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agents.

        Returns:
            2D int8 array of shape (height, width), see
            CellValue.to_observation for the encoding.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y in range(self.height):
            for x in range(self.width):
                obs[y, x] = self.grid[y][x].to_observation()
        return obs


def check_invariants(state: BoardState) -> None:
    """
    Recount the grid and compare against the running counters.

    Raises:
        InvariantViolation: If any counter disagrees with the grid.
    """
    if len(state.grid) != state.height or any(
        len(row) != state.width for row in state.grid
    ):
        raise InvariantViolation(
            f"grid shape does not match {state.width}x{state.height}"
        )

    # A loss repaints covered mines and flags without touching counters
    covered_values = {CellValue.COVERED, CellValue.MINE, CellValue.EXPLODED}
    flag_values = {CellValue.FLAG, CellValue.WRONG_FLAG}

    covered = 0
    flags = set()
    for y, row in enumerate(state.grid):
        for x, value in enumerate(row):
            if value in covered_values:
                covered += 1
            elif value in flag_values:
                flags.add(Coordinate(x, y))

    if covered != state.covered_count:
        raise InvariantViolation(
            f"covered_count is {state.covered_count}, grid has {covered}"
        )
    expected_remaining = state.mine_amount - len(state.flagged_coordinates)
    if state.remaining_count != expected_remaining:
        raise InvariantViolation(
            f"remaining_count is {state.remaining_count}, "
            f"expected {expected_remaining}"
        )
    if flags != state.flagged_coordinates:
        raise InvariantViolation("flag set does not match flagged cells")
