"""
Actions accepted by the engine's dispatch.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .mines import MineLayout


@dataclass(frozen=True)
class Reset:
    """Start over on a fresh board of the given size."""

    height: int
    width: int
    mine_amount: int


@dataclass(frozen=True)
class Flag:
    """Flag a covered cell."""

    x: int
    y: int


@dataclass(frozen=True)
class Unflag:
    """Remove the flag from a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class RevealCell:
    """
    Reveal one or more cells, flood filling zero-count regions.

    A single click starts from one coordinate; a chord starts from
    every covered neighbor of the chorded cell.
    """

    stack: Sequence[Tuple[int, int]]
    layout: MineLayout


@dataclass(frozen=True)
class LoseGame:
    """Detonate the mine at a position and end the game."""

    x: int
    y: int
    layout: MineLayout


Action = Union[Reset, Flag, Unflag, RevealCell, LoseGame]
