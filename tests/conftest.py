"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import BoardConfig, BoardState, Engine, Game, MineLayout


# ============================================================================
# Layout Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_layout() -> MineLayout:
    """2x2 board with a single mine at (1, 1)."""
    return MineLayout.from_coordinates([(1, 1)], width=2, height=2)


@pytest.fixture
def wall_layout() -> MineLayout:
    """
    5x5 board with a wall of mines in column 3.

        . . . * .
        . . . * .
        . . . * .
        . . . * .
        . . . * .
    """
    return MineLayout.from_coordinates(
        [(3, y) for y in range(5)], width=5, height=5
    )


@pytest.fixture
def empty_layout() -> MineLayout:
    """5x5 board with no mines for cascade testing."""
    return MineLayout.from_coordinates([], width=5, height=5)


# ============================================================================
# State Fixtures
# ============================================================================

@pytest.fixture
def fresh_state() -> BoardState:
    """Untouched 3x3 board state with 1 mine."""
    return BoardState.initial(3, 3, 1)


@pytest.fixture
def wall_engine() -> Engine:
    """Engine sized for wall_layout."""
    return Engine(BoardConfig(5, 5, 5))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def wall_game(wall_layout: MineLayout) -> Game:
    """Game on the fixed wall layout."""
    return Game(BoardConfig(5, 5, 5), layout=wall_layout)


@pytest.fixture
def seeded_config() -> BoardConfig:
    """Reproducible 9x9 configuration with 10 mines."""
    return BoardConfig(9, 9, 10, seed=1234)
