"""
Minesweeper engine.

Provides board snapshots, mine placement, flood-fill reveal and the game
session state machine consumed by a presentation layer.
"""
from .cell import (
    CellKind,
    CellValue,
    EMPTY,
    MINE,
    REVEALED_EMPTY,
    REVEALED_MINE,
    revealed_count,
)
from .board import Board, CellChange, InvalidSizeError, create_grid, diff_boards
from .placement import place_mines
from .reveal import count_adjacent_mines, reveal_cell
from .search import find_unrevealed
from .difficulty import DIFFICULTY_STORAGE_KEY, Difficulty, DifficultyConfig
from .timer import GameTimer, format_elapsed
from .session import (
    EXPOSED_MINE_CODE,
    FlagOutcome,
    GameSession,
    GameStatus,
    RevealedCellInfo,
    RevealOutcome,
    create_session,
)
from .environment import MinesweeperEnv

__all__ = [
    "CellKind",
    "CellValue",
    "EMPTY",
    "MINE",
    "REVEALED_EMPTY",
    "REVEALED_MINE",
    "revealed_count",
    "Board",
    "CellChange",
    "InvalidSizeError",
    "create_grid",
    "diff_boards",
    "place_mines",
    "count_adjacent_mines",
    "reveal_cell",
    "find_unrevealed",
    "DIFFICULTY_STORAGE_KEY",
    "Difficulty",
    "DifficultyConfig",
    "GameTimer",
    "format_elapsed",
    "EXPOSED_MINE_CODE",
    "FlagOutcome",
    "GameSession",
    "GameStatus",
    "RevealedCellInfo",
    "RevealOutcome",
    "create_session",
    "MinesweeperEnv",
]
