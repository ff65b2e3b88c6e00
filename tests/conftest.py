"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, Difficulty, GameSession, create_grid


class IdentityRandom(random.Random):
    """Random source whose shuffle keeps order, for predictable mines."""

    def shuffle(self, x, *args, **kwargs) -> None:
        return None


class OrderedRandom(random.Random):
    """Random source whose shuffle moves chosen indices to the front."""

    first = ()

    def shuffle(self, x, *args, **kwargs) -> None:
        x[:] = list(self.first) + [i for i in x if i not in self.first]


# ============================================================================
# Random Fixtures
# ============================================================================

@pytest.fixture
def identity_rng() -> random.Random:
    """Random source that leaves shuffled lists in order."""
    return IdentityRandom()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return create_grid(5)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the bottom-left corner."""
    return Board.from_symbols([
        ["E", "E", "E"],
        ["E", "E", "E"],
        ["M", "E", "E"],
    ])


@pytest.fixture
def surrounded_board() -> Board:
    """3x3 board of mines with an empty centre."""
    return Board.from_symbols([
        ["M", "M", "M"],
        ["M", "E", "M"],
        ["M", "M", "M"],
    ])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def beginner_session() -> GameSession:
    """Beginner session with seeded mine placement."""
    return GameSession(Difficulty.BEGINNER, rng=random.Random(1234))


@pytest.fixture
def row_mines_session() -> GameSession:
    """
    Intermediate session whose first click puts all 9 mines on row 0.

    Any first click outside row 0 keeps the identity order, so mines end
    up at (0, 0) .. (0, 8).
    """
    return GameSession(Difficulty.INTERMEDIATE, rng=IdentityRandom())


@pytest.fixture
def one_cell_left_session() -> GameSession:
    """
    Beginner session where the first click leaves only (0, 0) empty.

    Mines sit on (0, 1), (1, 0), (1, 1) and (5, 0); revealing (5, 5)
    cascades over everything except the walled-in corner.
    """
    rng = OrderedRandom()
    rng.first = [1, 6, 7, 30]
    session = GameSession(Difficulty.BEGINNER, rng=rng)
    session.reveal(5, 5)
    return session
