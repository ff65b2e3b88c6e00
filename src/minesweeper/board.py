"""
Board module for Minesweeper game.

Square grid of cell values addressed by (row, col). Boards are treated
as snapshots: every engine operation copies the board it is given and
returns the copy, so callers can diff old against new.
"""
from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .cell import CellValue, EMPTY

Position = Tuple[int, int]

T = TypeVar("T")

# 8-directional deltas; search order depends on this sequence
DELTAS: Tuple[Position, ...] = (
    (0, 1),    # Right
    (-1, 1),   # Up-Right
    (-1, 0),   # Up
    (-1, -1),  # Up-Left
    (0, -1),   # Left
    (1, -1),   # Down-Left
    (1, 0),    # Down
    (1, 1),    # Down-Right
)


class InvalidSizeError(ValueError):
    """Raised when a grid is requested with a negative size."""


# ============================================================================
# Grid Construction (Low-level)
# ============================================================================

def create_2d(value: T, size: int) -> List[List[T]]:
    """
    Create a square 2D list filled with ``value``.

    Raises:
        InvalidSizeError: If size is negative.
    """
    if size < 0:
        raise InvalidSizeError(f"Size must be non-negative, got {size}")
    return [[value] * size for _ in range(size)]


def create_grid(size: int) -> "Board":
    """Create a ``size`` x ``size`` board where every cell is empty."""
    return Board(create_2d(EMPTY, size))


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Minesweeper game board.

    Holds the cell values only; flags live in a separate overlay owned
    by the game session. Rows are stored as tuples, so a board handed
    out as a snapshot cannot be changed; engine code edits a working
    copy from ``to_rows`` and wraps the result in a new board.
    """

    _grid: Tuple[Tuple[CellValue, ...], ...] = ()

    def __post_init__(self) -> None:
        """Freeze whatever row sequences were passed in."""
        object.__setattr__(self, "_grid", tuple(tuple(row) for row in self._grid))

    @classmethod
    def from_symbols(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """Build a board from rows of symbols such as 'E', 'M' or '3'."""
        grid = [[CellValue.from_symbol(symbol) for symbol in row] for row in rows]
        for row in grid:
            if len(row) != len(grid):
                raise InvalidSizeError("Board must be square")
        return cls(grid)

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._grid)

    def __getitem__(self, position: Position) -> CellValue:
        row, col = position
        return self._grid[row][col]

    def copy(self) -> "Board":
        """New board with the same cells."""
        return Board(self._grid)

    def to_rows(self) -> List[List[CellValue]]:
        """Mutable working copy of the rows."""
        return [list(row) for row in self._grid]

    def replace(self, updates: Mapping[Position, CellValue]) -> "Board":
        """
        Get a new board with some cells changed.

        Args:
            updates: New values keyed by (row, col).

        Returns:
            New board; this one is left untouched.
        """
        rows = self.to_rows()
        for (row, col), value in updates.items():
            rows[row][col] = value
        return Board(rows)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples in DELTAS order.
        """
        result = []
        for delta_row, delta_col in DELTAS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                result.append((new_row, new_col))
        return result

    # ========================================================================
    # Queries
    # ========================================================================

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def positions_of(self, value: CellValue) -> List[Position]:
        """Positions whose value equals ``value``."""
        return [pos for pos in self.positions() if self[pos] == value]

    def count(self, value: CellValue) -> int:
        """Number of cells holding ``value``."""
        return sum(row.count(value) for row in self._grid)

    def has_empty(self) -> bool:
        """Check if any unrevealed safe cell remains."""
        return any(EMPTY in row for row in self._grid)

    def to_symbols(self) -> List[List[str]]:
        """Rows of compact symbols, the inverse of ``from_symbols``."""
        return [[value.symbol for value in row] for row in self._grid]

    def to_observation(self, flags: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = unrevealed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = triggered mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        if flags is not None:
            obs[flags] = -2
        return obs

    def __str__(self) -> str:
        return "\n".join(
            " ".join(f"{value.symbol:>2}" for value in row) for row in self._grid
        )


# ============================================================================
# Diffing
# ============================================================================

@dataclass(frozen=True)
class CellChange:
    """A single cell whose value differs between two snapshots."""

    row: int
    col: int
    old: CellValue
    new: CellValue


def diff_boards(old: Board, new: Board) -> List[CellChange]:
    """List the cells that changed between two boards of equal size."""
    return [
        CellChange(row, col, old[row, col], new[row, col])
        for row, col in new.positions()
        if old[row, col] != new[row, col]
    ]
