"""
Mine placement for Minesweeper boards.

Places mines uniformly at random while keeping one cell (the first
click) mine-free.
"""
import random
from typing import Optional

from .board import Board, Position
from .cell import MINE


def place_mines(
    board: Board,
    mines_count: int,
    safe_cell: Position,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Create a new board with mines placed at random positions.

    All linear cell indices are shuffled with Fisher-Yates
    (``random.Random.shuffle``) and walked in order, skipping the safe
    cell, until enough mines are placed. The input board is not
    modified.

    Args:
        board: Board to place mines on.
        mines_count: Number of mines requested. Clamped to the number of
            cells other than the safe one.
        safe_cell: (row, col) position that never receives a mine.
        rng: Random source; the module-level generator when omitted.

    Returns:
        New board with mines placed.

    Example:
        >>> board = place_mines(create_grid(8), 10, (3, 4))
    """
    if mines_count <= 0:
        return board.copy()

    size = board.size
    total_cells = size * size
    actual_mines = min(mines_count, total_cells - 1)

    indices = list(range(total_cells))
    (rng or random).shuffle(indices)

    rows = board.to_rows()
    safe_index = safe_cell[0] * size + safe_cell[1]
    placed = 0
    for index in indices:
        if placed >= actual_mines:
            break
        if index == safe_index:
            continue
        row, col = divmod(index, size)
        rows[row][col] = MINE
        placed += 1

    return Board(rows)
