"""
Minesweeper rules engine.

Provides cell values, mine layouts, neighbor lookup, the board state
reducer, and the adapters that play, display and train on it.
"""
from .cell import CellValue
from .adjacency import Coordinate, in_bounds, neighbors
from .mines import MineLayout, generate
from .board import BoardConfig, BoardState, GamePhase, check_invariants
from .actions import Action, Flag, LoseGame, Reset, RevealCell, Unflag
from .engine import Engine, chord_targets, reduce
from .errors import (
    InvalidCoordinate,
    InvalidStateTransition,
    InvariantViolation,
    MinesweeperError,
)
from .display import display_caption, display_cell, render_text
from .game import Game
from .environment import MinesweeperEnv

__all__ = [
    "CellValue",
    "Coordinate",
    "in_bounds",
    "neighbors",
    "MineLayout",
    "generate",
    "BoardConfig",
    "BoardState",
    "GamePhase",
    "check_invariants",
    "Action",
    "Flag",
    "LoseGame",
    "Reset",
    "RevealCell",
    "Unflag",
    "Engine",
    "chord_targets",
    "reduce",
    "InvalidCoordinate",
    "InvalidStateTransition",
    "InvariantViolation",
    "MinesweeperError",
    "display_caption",
    "display_cell",
    "render_text",
    "Game",
    "MinesweeperEnv",
]
