"""
Text presentation of a board.

Maps every cell value to a one-character glyph and every phase to a
caption, and renders whole boards as ASCII for terminals.
"""
from typing import Dict

from .board import BoardState, GamePhase
from .cell import CellValue


GLYPHS: Dict[CellValue, str] = {
    CellValue.ZERO: " ",
    CellValue.ONE: "1",
    CellValue.TWO: "2",
    CellValue.THREE: "3",
    CellValue.FOUR: "4",
    CellValue.FIVE: "5",
    CellValue.SIX: "6",
    CellValue.SEVEN: "7",
    CellValue.EIGHT: "8",
    CellValue.COVERED: ".",
    CellValue.FLAG: "F",
    CellValue.WRONG_FLAG: "X",
    CellValue.EXPLODED: "#",
    CellValue.MINE: "*",
}

CAPTIONS: Dict[GamePhase, str] = {
    GamePhase.PENDING: "New Game?",
    GamePhase.WON: "You Win",
    GamePhase.LOST: "You Lose :(",
}


def display_cell(value: CellValue) -> str:
    """Get the glyph for a cell value."""
    return GLYPHS[value]


def display_caption(phase: GamePhase) -> str:
    """Get the caption shown above the board."""
    return CAPTIONS[phase]


def render_text(state: BoardState, coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        state: Board to render.
        coordinates: Add column numbers on top and row numbers on the
            left, for players typing positions.

    Returns:
        One line per row, glyphs separated by spaces.
    """
    lines = []
    if coordinates:
        label_width = len(str(state.height - 1))
        header = " ".join(str(x % 10) for x in range(state.width))
        lines.append(" " * (label_width + 1) + header)

    for y, row in enumerate(state.grid):
        row_str = " ".join(display_cell(value) for value in row)
        if coordinates:
            row_str = f"{y:>{label_width}} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)
