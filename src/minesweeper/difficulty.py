"""
Difficulty presets for Minesweeper.

Each preset maps to a fixed board size and mine count. Only the preset
name is ever persisted by a presentation layer.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

DIFFICULTY_STORAGE_KEY = "difficulty"


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Board parameters for a difficulty preset.

    Attributes:
        size: Number of rows and columns of the square board.
        num_mines: Total mines to place.
    """

    size: int
    num_mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


class Difficulty(str, Enum):
    """Available difficulty levels, valued by their persisted name."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @property
    def config(self) -> DifficultyConfig:
        """Board parameters for this preset."""
        return DIFFICULTY_CONFIG[self]

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @classmethod
    def is_valid_name(cls, name: Optional[str]) -> bool:
        """Check if ``name`` is one of the persisted preset names."""
        return isinstance(name, str) and name in {d.value for d in cls}

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Difficulty":
        """Parse a persisted name, falling back to BEGINNER."""
        if cls.is_valid_name(name):
            return cls(name)
        return cls.BEGINNER


DIFFICULTY_CONFIG = {
    Difficulty.BEGINNER: DifficultyConfig(6, 4),
    Difficulty.INTERMEDIATE: DifficultyConfig(9, 9),
    Difficulty.EXPERT: DifficultyConfig(14, 35),
}
