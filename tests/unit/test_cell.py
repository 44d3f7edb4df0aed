"""
Unit tests for CellValue.

Tests number conversions, classification helpers and observation codes.
"""
import pytest
from minefield import CellValue


NUMBERS = [
    CellValue.ZERO,
    CellValue.ONE,
    CellValue.TWO,
    CellValue.THREE,
    CellValue.FOUR,
    CellValue.FIVE,
    CellValue.SIX,
    CellValue.SEVEN,
    CellValue.EIGHT,
]


# ============================================================================
# Conversion Tests
# ============================================================================

class TestConversion:
    """Test conversions between counts and cell values."""

    @pytest.mark.parametrize("count", range(9))
    def test_from_number_round_trips(self, count: int) -> None:
        """Every count maps to a value that maps back to it."""
        assert CellValue.from_number(count).to_number() == count

    @pytest.mark.parametrize("count", [-1, 9, 42])
    def test_from_number_rejects_out_of_range(self, count: int) -> None:
        """Counts outside 0-8 are not neighbor counts."""
        with pytest.raises(ValueError, match="unknown number"):
            CellValue.from_number(count)

    @pytest.mark.parametrize(
        "value",
        [
            CellValue.COVERED,
            CellValue.FLAG,
            CellValue.WRONG_FLAG,
            CellValue.EXPLODED,
            CellValue.MINE,
        ],
    )
    def test_non_numeric_to_number_is_none(self, value: CellValue) -> None:
        """Only numeric cells have a number."""
        assert value.to_number() is None


# ============================================================================
# Classification Tests
# ============================================================================

class TestClassification:
    """Test cell classification properties."""

    def test_numeric_values(self) -> None:
        """Exactly ZERO through EIGHT are numeric."""
        numeric = [value for value in CellValue if value.is_numeric]
        assert numeric == NUMBERS

    def test_zero_cannot_group_reveal(self) -> None:
        """A blank cell has nothing to chord."""
        assert CellValue.ZERO.can_group_reveal is False

    @pytest.mark.parametrize("value", NUMBERS[1:])
    def test_numbers_can_group_reveal(self, value: CellValue) -> None:
        """Any number 1-8 can be chorded."""
        assert value.can_group_reveal is True

    def test_covered_values(self) -> None:
        """Covered and flagged cells still hide their content."""
        covered = {value for value in CellValue if value.is_covered}
        assert covered == {CellValue.COVERED, CellValue.FLAG}


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for ML agents."""

    def test_covered_observation_is_negative_one(self) -> None:
        assert CellValue.COVERED.to_observation() == -1

    def test_flag_observation_is_negative_two(self) -> None:
        assert CellValue.FLAG.to_observation() == -2

    def test_wrong_flag_observation_is_negative_three(self) -> None:
        assert CellValue.WRONG_FLAG.to_observation() == -3

    @pytest.mark.parametrize("count", range(9))
    def test_numeric_observation_matches_count(self, count: int) -> None:
        """Revealed cell returns its adjacent mine count."""
        assert CellValue.from_number(count).to_observation() == count

    def test_mine_observations(self) -> None:
        """Mines shown after a loss are 9, the detonated one 10."""
        assert CellValue.MINE.to_observation() == 9
        assert CellValue.EXPLODED.to_observation() == 10

    def test_observation_codes_are_distinct(self) -> None:
        """No two values share an observation code."""
        codes = [value.to_observation() for value in CellValue]
        assert len(codes) == len(set(codes))
