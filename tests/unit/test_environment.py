"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Difficulty, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Beginner environment reset with a fixed seed."""
    environment = MinesweeperEnv(Difficulty.BEGINNER, render_mode="ansi")
    environment.reset(seed=42)
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_board(self, env: MinesweeperEnv) -> None:
        """Spaces are sized from the beginner board."""
        assert env.observation_space.shape == (6, 6)
        assert env.action_space.n == 36

    def test_reset_observation_all_hidden(self, env: MinesweeperEnv) -> None:
        """Fresh episode shows every cell hidden."""
        obs, info = env.reset(seed=1)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert info["status"] == "NOT_STARTED"
        assert env.observation_space.contains(obs)


class TestStep:
    """Test step rewards and termination."""

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        """First reveal never hits a mine."""
        _, reward, _, truncated, info = env.step(14)
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["revealed"] >= 1

    def test_repeated_action_is_penalised(
        self, env: MinesweeperEnv, identity_rng
    ) -> None:
        """Revealing a revealed cell costs a small penalty."""
        env.session.rng = identity_rng
        env.step(6)  # (1, 0) next to mines on (0, 0) .. (0, 3)
        assert env.session.ended is False
        _, reward, terminated, _, _ = env.step(6)
        _, reward, terminated, _, _ = env.step(0)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_winning_step(self, env: MinesweeperEnv, identity_rng) -> None:
        """Clearing the board on a packed layout wins."""
        env.session.rng = identity_rng
        _, reward, terminated, _, info = env.step(35)
        assert reward == 10.0
        assert terminated is True
        assert info["status"] == "WON"

    def test_mine_step_loses(self, env: MinesweeperEnv, identity_rng) -> None:
        """Revealing a mine ends the episode with a penalty."""
        env.session.rng = identity_rng
        env.session.reset(Difficulty.BEGINNER)
        env.step(6)  # (1, 0), mines land on (0, 0) .. (0, 3)
        _, reward, terminated, _, _ = env.step(0)
        assert reward == -10.0
        assert terminated is True


class TestRenderAndMask:
    """Test rendering and action masking."""

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI render shows one line per row."""
        text = env.render()
        assert len(text.splitlines()) == 6
        assert set(text.replace(" ", "").replace("\n", "")) == {"."}

    def test_action_mask_excludes_revealed(self, env: MinesweeperEnv) -> None:
        """Revealed cells are masked out."""
        assert env.get_action_mask().all()
        env.step(0)
        mask = env.get_action_mask()
        assert mask.shape == (36,)
        assert mask[0] == False  # noqa: E712

    def test_render_shows_exposed_mines_after_loss(
        self, env: MinesweeperEnv, identity_rng
    ) -> None:
        """Mines exposed by a loss stay visible in later renders."""
        env.session.rng = identity_rng
        env.step(6)
        env.step(0)
        first_row = env.render().splitlines()[0].split(" ")
        assert first_row[:4] == ["X", "*", "*", "*"]
        assert env.observation_space.contains(env.session.observation())
