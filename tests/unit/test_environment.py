"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minefield import BoardConfig, CellValue, Game, MineLayout, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Small seeded environment."""
    return MinesweeperEnv(BoardConfig(4, 5, 3, seed=11), render_mode="ansi")


@pytest.fixture
def wall_env(wall_layout: MineLayout) -> MinesweeperEnv:
    """Environment playing the fixed wall layout."""
    config = BoardConfig(5, 5, 5)
    environment = MinesweeperEnv(config)
    environment.game = Game(config, layout=wall_layout)
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_one_action_per_cell(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 20

    def test_reset_observation_fits_space(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=5)
        assert obs.shape == (4, 5)
        assert obs.dtype == np.int8
        assert env.observation_space.contains(obs)
        assert np.all(obs == -1)
        assert info["game_state"] == "PENDING"
        assert info["valid_actions"] == 20

    def test_reset_seed_is_reproducible(self, env: MinesweeperEnv) -> None:
        env.reset(seed=9)
        first = list(env.game.layout)
        env.reset(seed=9)
        assert list(env.game.layout) == first


class TestStep:
    """Test step rewards and termination."""

    def test_safe_reveal_rewards_one(self, wall_env: MinesweeperEnv) -> None:
        obs, reward, terminated, truncated, info = wall_env.step(0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 0] == 0
        assert info["revealed"] == 15

    def test_mine_reveal_terminates(self, wall_env: MinesweeperEnv) -> None:
        obs, reward, terminated, _, info = wall_env.step(3)
        assert reward == -10.0
        assert terminated is True
        assert obs[0, 3] == CellValue.EXPLODED.to_observation()
        assert info["game_state"] == "LOST"

    def test_repeated_action_is_invalid(self, wall_env: MinesweeperEnv) -> None:
        wall_env.step(0)
        _, reward, terminated, _, _ = wall_env.step(1)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_win_rewards_ten(self, wall_env: MinesweeperEnv) -> None:
        wall_env.step(0)
        rewards = [wall_env.step(y * 5 + 4)[1] for y in range(5)]
        assert rewards == [1.0, 1.0, 1.0, 1.0, 10.0]
        assert wall_env.game.state.is_won


class TestActionMask:
    """Test valid action masks."""

    def test_mask_marks_covered_cells(self, wall_env: MinesweeperEnv) -> None:
        wall_env.step(0)
        mask = wall_env.get_action_mask().reshape(5, 5)
        assert mask[:, :3].sum() == 0
        assert mask[:, 3:].all()

    def test_mask_empty_after_game_over(self, wall_env: MinesweeperEnv) -> None:
        wall_env.step(3)
        assert not wall_env.get_action_mask().any()


class TestRender:
    """Test rendering modes."""

    def test_ansi_render(self, env: MinesweeperEnv) -> None:
        env.reset()
        assert env.render() == "\n".join([". . . . ."] * 4)

    def test_human_render_prints(self, capsys: pytest.CaptureFixture) -> None:
        env = MinesweeperEnv(BoardConfig(1, 2, 0), render_mode="human")
        assert env.render() is None
        assert capsys.readouterr().out == ". .\n"
