"""
Unit tests for text presentation.
"""
import pytest
from minefield import BoardState, CellValue, GamePhase, display_caption, display_cell, render_text


class TestGlyphs:
    """Test the glyph table."""

    @pytest.mark.parametrize("value", list(CellValue))
    def test_every_value_has_a_glyph(self, value: CellValue) -> None:
        """The mapping is total over CellValue."""
        glyph = display_cell(value)
        assert isinstance(glyph, str)
        assert len(glyph) == 1

    def test_zero_is_blank(self) -> None:
        assert display_cell(CellValue.ZERO) == " "

    def test_numbers_show_digits(self) -> None:
        for count in range(1, 9):
            assert display_cell(CellValue.from_number(count)) == str(count)

    def test_glyphs_are_distinct(self) -> None:
        glyphs = [display_cell(value) for value in CellValue]
        assert len(glyphs) == len(set(glyphs))


class TestCaption:
    """Test the caption per phase."""

    @pytest.mark.parametrize(
        "phase, caption",
        [
            (GamePhase.PENDING, "New Game?"),
            (GamePhase.WON, "You Win"),
            (GamePhase.LOST, "You Lose :("),
        ],
    )
    def test_caption(self, phase: GamePhase, caption: str) -> None:
        assert display_caption(phase) == caption


class TestRenderText:
    """Test whole-board rendering."""

    def test_fresh_board(self) -> None:
        state = BoardState.initial(2, 3, 1)
        assert render_text(state) == ". . .\n. . ."

    def test_mixed_board(self) -> None:
        state = BoardState.initial(2, 3, 1)
        state.grid[0] = [CellValue.ZERO, CellValue.ONE, CellValue.FLAG]
        state.grid[1] = [CellValue.WRONG_FLAG, CellValue.EXPLODED, CellValue.MINE]
        assert render_text(state) == "  1 F\nX # *"

    def test_coordinates(self) -> None:
        state = BoardState.initial(2, 3, 0)
        assert render_text(state, coordinates=True).splitlines() == [
            "  0 1 2",
            "0 . . .",
            "1 . . .",
        ]

    def test_coordinates_pad_row_labels(self) -> None:
        lines = render_text(BoardState.initial(11, 2, 0), coordinates=True).splitlines()
        assert lines[0] == "   0 1"
        assert lines[1] == " 0 . ."
        assert lines[11] == "10 . ."
