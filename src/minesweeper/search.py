"""
Connectivity search over a Minesweeper board.

Used after a flood-fill to hand keyboard focus to a cell that is still
interactive.
"""
from collections import deque
from typing import Deque, Optional

from .board import Board, Position


def find_unrevealed(board: Board, start: Position) -> Optional[Position]:
    """
    Find an unrevealed (empty or mine) cell reachable from ``start``.

    Breadth-first search over the 8-neighbour graph. The first matching
    cell in frontier order is returned, which is not necessarily the
    closest one by any distance metric. The start cell itself is never
    returned.

    Args:
        board: Current board state.
        start: (row, col) to search from.

    Returns:
        Position of an unrevealed cell, or None if the board is cleared.
    """
    visited = [[False] * board.size for _ in range(board.size)]
    visited[start[0]][start[1]] = True
    queue: Deque[Position] = deque([start])

    while queue:
        row, col = queue.popleft()
        for neighbor_row, neighbor_col in board.neighbors(row, col):
            if visited[neighbor_row][neighbor_col]:
                continue
            if board[neighbor_row, neighbor_col].is_unrevealed:
                return neighbor_row, neighbor_col
            visited[neighbor_row][neighbor_col] = True
            queue.append((neighbor_row, neighbor_col))

    return None
