"""
Reveal engine for Minesweeper boards.

Computes the board that results from revealing one cell, expanding
automatically through regions with no adjacent mines.
"""
from typing import List

from .board import Board, Position
from .cell import EMPTY, MINE, revealed_count


def count_adjacent_mines(board: Board, row: int, col: int) -> int:
    """Count unrevealed mines in the 8 neighbours of a cell."""
    return sum(1 for pos in board.neighbors(row, col) if board[pos] == MINE)


def reveal_cell(board: Board, cell: Position) -> Board:
    """
    Get a new board after ``cell`` is revealed.

    Only empty cells are revealed; a mine or an already revealed target
    leaves the board unchanged. Cells with adjacent mines become numbered
    and stop the expansion, cells without become revealed empty and push
    their neighbours onto the worklist. A revealed cell is never pushed
    twice because only empty cells are processed.

    Args:
        board: Current board state (left untouched).
        cell: (row, col) of the clicked cell.

    Returns:
        New board with revealed cells.
    """
    rows = board.to_rows()
    stack: List[Position] = [cell]

    while stack:
        row, col = stack.pop()
        if rows[row][col] != EMPTY:
            continue

        # mine positions are fixed during a reveal
        mines = count_adjacent_mines(board, row, col)
        rows[row][col] = revealed_count(mines)
        if mines == 0:
            stack.extend(board.neighbors(row, col))

    return Board(rows)
