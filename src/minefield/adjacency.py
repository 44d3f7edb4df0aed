"""
Grid coordinates and neighbor lookup.
"""
from typing import List, NamedTuple

from .errors import InvalidCoordinate


class Coordinate(NamedTuple):
    """A cell position; x is the column, y the row."""

    x: int
    y: int


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= x < width and 0 <= y < height


def neighbors(x: int, y: int, width: int, height: int) -> List[Coordinate]:
    """
    Get valid neighboring cell positions.

    Neighbors are listed row by row, top to bottom and left to right.

    Args:
        x: Column index of center cell.
        y: Row index of center cell.
        width: Number of columns on the board.
        height: Number of rows on the board.

    Returns:
        Up to 8 coordinates, never including the center.

    Raises:
        InvalidCoordinate: If the center is outside the board.
    """
    if not in_bounds(x, y, width, height):
        raise InvalidCoordinate(x, y, width, height)

    result = []
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            new_x = x + delta_x
            new_y = y + delta_y
            if in_bounds(new_x, new_y, width, height):
                result.append(Coordinate(new_x, new_y))
    return result
