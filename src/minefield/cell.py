"""
Cell module for Minesweeper game.

Defines the closed set of values a grid cell can hold and the
conversions between neighbor-mine counts and cell values.
"""
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellValue(Enum):
    """Every state a grid cell can be displayed in."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    COVERED = auto()
    FLAG = auto()
    WRONG_FLAG = auto()
    EXPLODED = auto()
    MINE = auto()

    @classmethod
    def from_number(cls, count: int) -> "CellValue":
        """
        Convert a neighbor-mine count to its cell value.

        Args:
            count: Number of adjacent mines (0-8).

        Returns:
            The matching ZERO..EIGHT value.

        Raises:
            ValueError: If count is outside 0-8.
        """
        if not 0 <= count <= 8:
            raise ValueError(f"unknown number {count}")
        return _NUMERIC[count]

    def to_number(self) -> Optional[int]:
        """Return the mine count of a numeric cell, None otherwise."""
        if self.is_numeric:
            return self.value
        return None

    @property
    def is_numeric(self) -> bool:
        """Check if cell holds a revealed mine count."""
        return self in _NUMERIC

    @property
    def is_covered(self) -> bool:
        """Check if cell is still covered (plain or flagged)."""
        return self in (CellValue.COVERED, CellValue.FLAG)

    @property
    def can_group_reveal(self) -> bool:
        """Check if cell is a number that can be chorded (1-8)."""
        return self.is_numeric and self is not CellValue.ZERO

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agents.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            -3: Incorrect flag (after a loss)
            0-8: Revealed cell with adjacent mine count
            9: Uncovered mine (after a loss)
            10: The mine that was clicked
        """
        if self.is_numeric:
            return self.value
        return _OBSERVATION_CODES[self]


_NUMERIC = (
    CellValue.ZERO,
    CellValue.ONE,
    CellValue.TWO,
    CellValue.THREE,
    CellValue.FOUR,
    CellValue.FIVE,
    CellValue.SIX,
    CellValue.SEVEN,
    CellValue.EIGHT,
)

_OBSERVATION_CODES = {
    CellValue.COVERED: -1,
    CellValue.FLAG: -2,
    CellValue.WRONG_FLAG: -3,
    CellValue.MINE: 9,
    CellValue.EXPLODED: 10,
}
