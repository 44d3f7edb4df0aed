"""
Mine layout generation.

A layout is the fixed set of mine positions for one game. It is built
once per game and only queried afterwards.
"""
import logging
from typing import FrozenSet, Iterable, Iterator, Optional, Set

import numpy as np

from .adjacency import Coordinate, in_bounds
from .errors import InvalidCoordinate

logger = logging.getLogger(__name__)


# ============================================================================
# Mine Layout
# ============================================================================

class MineLayout:
    """
    Immutable set of unique mine coordinates for a board.

    Attributes:
        width: Number of columns of the board the layout belongs to.
        height: Number of rows of the board the layout belongs to.
    """

    def __init__(
        self, mines: FrozenSet[Coordinate], width: int, height: int
    ) -> None:
        self._mines = mines
        self.width = width
        self.height = height

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[tuple], width: int, height: int
    ) -> "MineLayout":
        """
        Build a layout from explicit positions.

        Args:
            coordinates: (x, y) pairs, each inside the board.
            width: Number of columns.
            height: Number of rows.

        Raises:
            InvalidCoordinate: If a position is outside the board.
            ValueError: If a position is listed twice.
        """
        mines: Set[Coordinate] = set()
        for x, y in coordinates:
            if not in_bounds(x, y, width, height):
                raise InvalidCoordinate(x, y, width, height)
            position = Coordinate(x, y)
            if position in mines:
                raise ValueError(f"duplicate mine at {position}")
            mines.add(position)
        return cls(frozenset(mines), width, height)

    def contains(self, x: int, y: int) -> bool:
        """Check if there is a mine at position."""
        return Coordinate(x, y) in self._mines

    def __contains__(self, position: object) -> bool:
        return position in self._mines

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(sorted(self._mines))

    def __len__(self) -> int:
        return len(self._mines)

    def __repr__(self) -> str:
        return (
            f"MineLayout({self.width}x{self.height}, "
            f"{len(self._mines)} mines)"
        )


def generate(
    height: int,
    width: int,
    mine_amount: int,
    rng: Optional[np.random.Generator] = None,
) -> MineLayout:
    """
    Place mines uniformly at random by rejection sampling.

    Random positions are drawn until the set holds exactly
    mine_amount distinct coordinates.

    Args:
        height: Number of rows.
        width: Number of columns.
        mine_amount: Mines to place, at most height * width.
        rng: Random generator (default: a fresh unseeded one).

    Returns:
        The generated layout.

    Raises:
        ValueError: If dimensions or mine count are invalid.
    """
    if width < 1 or height < 1:
        raise ValueError("Board dimensions must be positive")
    if mine_amount < 0:
        raise ValueError("Number of mines cannot be negative")
    if mine_amount > width * height:
        raise ValueError(f"Too many mines (max {width * height})")

    rng = rng if rng is not None else np.random.default_rng()

    mines: Set[Coordinate] = set()
    draws = 0
    while len(mines) < mine_amount:
        x = int(rng.integers(width))
        y = int(rng.integers(height))
        mines.add(Coordinate(x, y))
        draws += 1

    logger.debug(
        "placed %d mines on %dx%d board in %d draws",
        mine_amount, width, height, draws,
    )
    return MineLayout(frozenset(mines), width, height)
