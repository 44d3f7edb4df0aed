"""
Exceptions raised by the Minesweeper engine.

All of them signal programmer errors from the engine's caller, never
normal game outcomes: winning and losing are phases, not exceptions.
"""


class MinesweeperError(Exception):
    """Base class for engine errors."""


class InvalidCoordinate(MinesweeperError, IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"coordinate ({x}, {y}) outside {width}x{height} grid"
        )
        self.x = x
        self.y = y


class InvalidStateTransition(MinesweeperError):
    """Raised when an action is not allowed in the current state."""


class InvariantViolation(MinesweeperError):
    """Raised when the board counters disagree with the grid."""
