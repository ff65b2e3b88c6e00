"""
Gymnasium environment wrapper for Minesweeper.

Drives a game session through the standard RL interface, which makes
the engine playable by scripted or learning agents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import Difficulty
from .session import EXPOSED_MINE_CODE, GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = unrevealed cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = triggered mine
        - 10 = mine exposed after a loss

    Actions:
        Discrete action space of size size * size.
        Action i reveals the cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.BEGINNER,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Preset for board size and mine count.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.session = GameSession(difficulty)
        self.render_mode = render_mode
        size = self.session.size

        self.observation_space = spaces.Box(
            low=-2,
            high=EXPOSED_MINE_CODE,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(size * size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seed for mine placement reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session.rng = random.Random(seed)
        self.session.reset()
        self._steps = 0

        return self.session.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = divmod(int(action), self.session.size)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = self.session.ended

        return self.session.observation(), reward, terminated, False, self._get_info()

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal the cell and score the result."""
        if self.session.ended:
            return -0.1
        if (
            self.session.board[row, col].is_revealed
            or self.session.is_flagged(row, col)
        ):
            return -0.1

        self.session.reveal(row, col)

        if self.session.won:
            return 10.0
        if self.session.lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        revealed = sum(1 for pos in board.positions() if board[pos].is_revealed)
        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.session.size ** 2 - self.session.num_mines,
            "status": self.session.status.name,
            "remaining_flags": self.session.remaining_flags,
            "elapsed": self.session.timer.elapsed,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        glyphs = {-1: ".", -2: "F", 9: "X", EXPOSED_MINE_CODE: "*", 0: " "}
        lines = []
        for row in self.session.observation():
            lines.append(" ".join(glyphs.get(int(val), str(val)) for val in row))
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell can be revealed.
        """
        obs = self.session.observation()
        return (obs == -1).reshape(-1)
