"""
Game engine for Minesweeper.

The reducer maps a board state and an action to the next board state.
It never mutates its input: every transition validates first, then
works on a private copy, so a rejected action leaves the previous
state exactly as it was.

The Engine class owns a single state and is the only way to move it
forward during a game.
"""
import logging
from typing import Callable, Dict, List, Optional, Type

from .actions import Action, Flag, LoseGame, Reset, RevealCell, Unflag
from .adjacency import Coordinate, neighbors
from .board import BoardConfig, BoardState, GamePhase, check_invariants
from .cell import CellValue
from .errors import InvalidStateTransition
from .mines import MineLayout

logger = logging.getLogger(__name__)


# ============================================================================
# Transitions (Low-level)
# ============================================================================

def _check_win(state: BoardState) -> None:
    """Mark the game won once only mines are left under cover."""
    if state.covered_count == state.remaining_count:
        state.phase = GamePhase.WON
        logger.info("game won")


def _require_layout(state: BoardState, layout: MineLayout) -> None:
    if layout.width != state.width or layout.height != state.height:
        raise InvalidStateTransition(
            f"mine layout is {layout.width}x{layout.height}, "
            f"board is {state.width}x{state.height}"
        )


def _reset(state: BoardState, action: Reset) -> BoardState:
    logger.debug(
        "reset to %dx%d with %d mines",
        action.width, action.height, action.mine_amount,
    )
    return BoardState.initial(action.height, action.width, action.mine_amount)


def _flag(state: BoardState, action: Flag) -> BoardState:
    if state.cell(action.x, action.y) != CellValue.COVERED:
        raise InvalidStateTransition(
            f"cannot flag ({action.x}, {action.y}): "
            f"cell is {state.grid[action.y][action.x].name}"
        )

    next_state = state.copy()
    next_state.grid[action.y][action.x] = CellValue.FLAG
    next_state.flagged_coordinates = state.flagged_coordinates | {
        Coordinate(action.x, action.y)
    }
    next_state.covered_count -= 1
    next_state.remaining_count -= 1
    _check_win(next_state)
    return next_state


def _unflag(state: BoardState, action: Unflag) -> BoardState:
    if state.cell(action.x, action.y) != CellValue.FLAG:
        raise InvalidStateTransition(
            f"cannot unflag ({action.x}, {action.y}): "
            f"cell is {state.grid[action.y][action.x].name}"
        )

    next_state = state.copy()
    next_state.grid[action.y][action.x] = CellValue.COVERED
    next_state.flagged_coordinates = state.flagged_coordinates - {
        Coordinate(action.x, action.y)
    }
    next_state.covered_count += 1
    next_state.remaining_count += 1
    _check_win(next_state)
    return next_state


def _reveal_cell(state: BoardState, action: RevealCell) -> BoardState:
    """
    Reveal the starting cells and flood fill outwards from zeros.

    The fill runs on an explicit stack. A position can be pushed
    several times before it is processed; once revealed, later
    pops of it are skipped so counters move only once per cell.
    """
    layout = action.layout
    _require_layout(state, layout)

    start = []
    for x, y in action.stack:
        value = state.cell(x, y)
        if not value.is_covered:
            raise InvalidStateTransition(
                f"cannot reveal ({x}, {y}): cell is {value.name}"
            )
        if layout.contains(x, y):
            raise InvalidStateTransition(
                f"cannot reveal ({x}, {y}): cell is a mine, use LoseGame"
            )
        start.append(Coordinate(x, y))

    next_state = state.copy()
    grid = next_state.grid
    flags = set(state.flagged_coordinates)
    stack = list(start)
    revealed = 0

    while stack:
        position = stack.pop()
        current = grid[position.y][position.x]
        if not current.is_covered:
            continue

        adjacent = neighbors(position.x, position.y, state.width, state.height)
        count = sum(1 for p in adjacent if layout.contains(p.x, p.y))

        if current == CellValue.COVERED:
            next_state.covered_count -= 1
        else:
            # The fill only reaches safe cells, so this flag was wrong
            flags.discard(position)
            next_state.remaining_count += 1

        grid[position.y][position.x] = CellValue.from_number(count)
        revealed += 1

        if count == 0:
            stack.extend(p for p in adjacent if grid[p.y][p.x].is_covered)

    next_state.flagged_coordinates = frozenset(flags)
    logger.debug("revealed %d cells from %d start points", revealed, len(start))
    _check_win(next_state)
    return next_state


def _lose_game(state: BoardState, action: LoseGame) -> BoardState:
    layout = action.layout
    _require_layout(state, layout)
    value = state.cell(action.x, action.y)
    if not layout.contains(action.x, action.y):
        raise InvalidStateTransition(
            f"cannot detonate ({action.x}, {action.y}): no mine there"
        )
    if value != CellValue.COVERED:
        raise InvalidStateTransition(
            f"cannot detonate ({action.x}, {action.y}): cell is {value.name}"
        )

    next_state = state.copy()
    grid = next_state.grid
    grid[action.y][action.x] = CellValue.EXPLODED

    clicked = Coordinate(action.x, action.y)
    for mine in layout:
        if mine != clicked and mine not in state.flagged_coordinates:
            grid[mine.y][mine.x] = CellValue.MINE
    for flagged in state.flagged_coordinates:
        if flagged not in layout:
            grid[flagged.y][flagged.x] = CellValue.WRONG_FLAG

    next_state.phase = GamePhase.LOST
    logger.info("game lost at (%d, %d)", action.x, action.y)
    return next_state


_HANDLERS: Dict[Type, Callable[[BoardState, Action], BoardState]] = {
    Reset: _reset,
    Flag: _flag,
    Unflag: _unflag,
    RevealCell: _reveal_cell,
    LoseGame: _lose_game,
}


# ============================================================================
# Reducer (Mid-level)
# ============================================================================

def reduce(state: BoardState, action: Action) -> BoardState:
    """
    Compute the state that follows an action.

    Args:
        state: Current board state, left untouched.
        action: One of Reset, Flag, Unflag, RevealCell, LoseGame.

    Returns:
        The next board state.

    Raises:
        InvalidCoordinate: If the action targets a cell off the board.
        InvalidStateTransition: If the action is not allowed now,
            including any action other than Reset on a finished game.
        TypeError: If action is not an engine action.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"unknown action {action!r}")
    if state.phase.is_terminal and not isinstance(action, Reset):
        raise InvalidStateTransition(
            f"game is {state.phase.name}, only Reset is accepted"
        )
    return handler(state, action)


def chord_targets(state: BoardState, x: int, y: int) -> List[Coordinate]:
    """
    Get the cells a chord on position would reveal.

    A chord is possible on a numbered cell (1-8) whose flagged
    neighbors match its number.

    Returns:
        Covered, unflagged neighbors, or an empty list if the chord
        is not possible.
    """
    value = state.cell(x, y)
    if not value.can_group_reveal:
        return []

    covered = []
    flag_count = 0
    for position in neighbors(x, y, state.width, state.height):
        neighbor = state.grid[position.y][position.x]
        if neighbor == CellValue.FLAG:
            flag_count += 1
        elif neighbor == CellValue.COVERED:
            covered.append(position)

    if flag_count != value.to_number():
        return []
    return covered


# ============================================================================
# Engine (High-level)
# ============================================================================

class Engine:
    """
    Single owner of a board state.

    All changes go through dispatch, which swaps in the next state only
    after the whole transition has succeeded.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        check: bool = True,
    ) -> None:
        """
        Initialize the engine with a fresh board.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            check: Recount the grid after every action and raise
                InvariantViolation if the counters drifted.
        """
        config = config or BoardConfig()
        self.check = check
        self._state = BoardState.initial(
            config.height, config.width, config.mine_amount
        )

    @property
    def state(self) -> BoardState:
        """Get current board state. Treat it as read-only."""
        return self._state

    @property
    def phase(self) -> GamePhase:
        """Get current game phase."""
        return self._state.phase

    def dispatch(self, action: Action) -> BoardState:
        """
        Apply an action and make the result the current state.

        Raises:
            The errors of reduce, plus InvariantViolation when checking
            is enabled and the transition left the counters inconsistent.
        """
        next_state = reduce(self._state, action)
        if self.check:
            check_invariants(next_state)
        self._state = next_state
        return next_state
