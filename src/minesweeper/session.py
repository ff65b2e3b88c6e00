"""
Game session for Minesweeper.

Orchestrates mine placement, reveals and flags against player actions
and exposes snapshots plus change-sets for a presentation layer.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .board import Board, CellChange, Position, create_grid, diff_boards
from .cell import EMPTY, MINE, REVEALED_MINE
from .difficulty import Difficulty
from .placement import place_mines
from .reveal import reveal_cell
from .search import find_unrevealed
from .timer import GameTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

EXPOSED_MINE_CODE = 10


class GameStatus(Enum):
    """Possible states of a game session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class RevealedCellInfo:
    """Position and adjacent mine count of the cell the player revealed."""

    row: int
    col: int
    adjacent_mines: int


@dataclass
class RevealOutcome:
    """
    Result of a reveal action.

    Attributes:
        changes: Cells whose board value changed.
        status: Session status after the action.
        focus: Cell that should receive keyboard focus next, if any.
        revealed: Description of the revealed cell for announcements.
        exposed_mines: Unflagged mines to show after a loss.
        auto_flagged: Mines flagged automatically after a win.
        unflagged: Flagged cells cleared because the flood-fill revealed them.
    """

    changes: List[CellChange] = field(default_factory=list)
    status: GameStatus = GameStatus.NOT_STARTED
    focus: Optional[Position] = None
    revealed: Optional[RevealedCellInfo] = None
    exposed_mines: List[Position] = field(default_factory=list)
    auto_flagged: List[Position] = field(default_factory=list)
    unflagged: List[Position] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Check if the action had any effect on board or flags."""
        return bool(self.changes or self.auto_flagged or self.unflagged)


@dataclass(frozen=True)
class FlagOutcome:
    """
    Result of a flag toggle.

    Attributes:
        row: Row index of the target.
        col: Column index of the target.
        toggled: Whether the flag bit actually flipped.
        flagged: Flag state of the cell after the action.
        remaining_flags: Mines minus flags placed; may be negative.
    """

    row: int
    col: int
    toggled: bool
    flagged: bool
    remaining_flags: int


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    State machine for one game: NOT_STARTED -> IN_PROGRESS -> WON | LOST.

    Mines are placed lazily on the first reveal so that the first
    clicked cell is always safe. The board is replaced with a new
    snapshot on every change and never mutated in place.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.BEGINNER,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a fresh session.

        Args:
            difficulty: Preset deciding board size and mine count.
            rng: Random source for mine placement.
        """
        self.rng = rng
        self.timer = GameTimer()
        self._difficulty = difficulty
        self._init_state()

    def _init_state(self) -> None:
        """Create empty board and flag overlay for the current preset."""
        size = self._difficulty.size
        self._board = create_grid(size)
        self._flags = np.zeros((size, size), dtype=bool)
        self._remaining_flags = self._difficulty.num_mines
        self._status = GameStatus.NOT_STARTED
        self._first_click_pending = True
        self._exposed_mines: List[Position] = []

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell. Revealing
        a mine loses the game; revealing the last empty cell wins it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome describing what changed.
        """
        if self.ended:
            return RevealOutcome(status=self._status)

        self._start()

        if self._first_click_pending:
            self._board = place_mines(
                self._board, self.num_mines, (row, col), self.rng
            )
            self._first_click_pending = False

        if self._flags[row, col]:
            return RevealOutcome(status=self._status)

        if self._board[row, col] == MINE:
            return self._trigger_mine(row, col)

        return self._reveal_safe(row, col)

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """
        Toggle flag on a cell.

        Only unrevealed cells can be flagged. The remaining count is not
        clamped so that placing too many flags stays visible.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Outcome with the new flag state and remaining count.
        """
        if not self.ended:
            self._start()
        if self.ended or not self._board[row, col].is_unrevealed:
            return FlagOutcome(
                row, col, False, bool(self._flags[row, col]), self._remaining_flags
            )

        flagged = self._set_flag(row, col, not self._flags[row, col])
        return FlagOutcome(row, col, True, flagged, self._remaining_flags)

    def reset(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Reset the session for a new game.

        Args:
            difficulty: New preset; the current one is kept when omitted.
        """
        if difficulty is not None and difficulty != self._difficulty:
            logger.info(
                "Difficulty changed from %s to %s",
                self._difficulty.value,
                difficulty.value,
            )
            self._difficulty = difficulty
        self._init_state()
        self.timer.reset()
        logger.debug(
            "Session reset: %dx%d with %d mines",
            self.size,
            self.size,
            self.num_mines,
        )

    def tick(self) -> int:
        """Advance the elapsed-time counter; stops once the game ended."""
        return self.timer.tick(self.ended)

    # ========================================================================
    # Transitions (Internal)
    # ========================================================================

    def _start(self) -> None:
        """Move from NOT_STARTED to IN_PROGRESS and start the timer."""
        if self._status == GameStatus.NOT_STARTED:
            self._status = GameStatus.IN_PROGRESS
            self.timer.start()
            logger.debug("Game started on %s", self._difficulty.value)

    def _set_flag(self, row: int, col: int, flagged: bool) -> bool:
        """Write a flag bit and keep the remaining count in step."""
        if self._flags[row, col] != flagged:
            self._flags[row, col] = flagged
            self._remaining_flags += -1 if flagged else 1
        return flagged

    def _trigger_mine(self, row: int, col: int) -> RevealOutcome:
        """Explode the mine at (row, col) and end the game as lost."""
        previous = self._board
        self._board = previous.replace({(row, col): REVEALED_MINE})
        self._end(GameStatus.LOST)

        self._exposed_mines = [
            pos for pos in self._board.positions_of(MINE)
            if not self._flags[pos]
        ]
        return RevealOutcome(
            changes=diff_boards(previous, self._board),
            status=self._status,
            exposed_mines=list(self._exposed_mines),
        )

    def _reveal_safe(self, row: int, col: int) -> RevealOutcome:
        """Run the reveal engine, report the cell and check for a win."""
        previous = self._board
        updated = reveal_cell(previous, (row, col))
        changes = diff_boards(previous, updated)
        self._board = updated
        outcome = RevealOutcome(changes=changes)

        for change in changes:
            if self._flags[change.row, change.col]:
                self._set_flag(change.row, change.col, False)
                outcome.unflagged.append((change.row, change.col))

        outcome.revealed = RevealedCellInfo(
            row, col, updated[row, col].adjacent_mines
        )

        if updated.has_empty():
            outcome.focus = find_unrevealed(updated, (row, col))
        else:
            for pos in updated.positions_of(MINE):
                if not self._flags[pos]:
                    self._set_flag(pos[0], pos[1], True)
                    outcome.auto_flagged.append(pos)
            self._end(GameStatus.WON)

        outcome.status = self._status
        return outcome

    def _end(self, status: GameStatus) -> None:
        self._status = status
        self.timer.stop()
        logger.info(
            "Game %s after %d seconds", status.name.lower(), self.timer.elapsed
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Current board snapshot; replaced, never mutated, on change."""
        return self._board

    @property
    def flags(self) -> np.ndarray:
        """Copy of the flag overlay."""
        return self._flags.copy()

    def is_flagged(self, row: int, col: int) -> bool:
        return bool(self._flags[row, col])

    @property
    def remaining_flags(self) -> int:
        return self._remaining_flags

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def size(self) -> int:
        return self._difficulty.size

    @property
    def num_mines(self) -> int:
        return self._difficulty.num_mines

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def started(self) -> bool:
        """Check if the player has acted since the last reset."""
        return self._status != GameStatus.NOT_STARTED

    @property
    def ended(self) -> bool:
        return self._status in (GameStatus.WON, GameStatus.LOST)

    @property
    def won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def first_click_pending(self) -> bool:
        """Check if mines are still waiting for the first reveal."""
        return self._first_click_pending

    @property
    def exposed_mines(self) -> List[Position]:
        """Unflagged mines shown after a loss; empty otherwise."""
        return list(self._exposed_mines)

    def observation(self) -> np.ndarray:
        """
        Board as an int8 array for display or agents.

        Returns:
            Same codes as ``Board.to_observation`` plus:
                -2 = flagged
                10 = mine exposed after a loss
        """
        obs = self._board.to_observation(self._flags)
        for row, col in self._exposed_mines:
            obs[row, col] = EXPOSED_MINE_CODE
        return obs


def create_session(
    difficulty: Difficulty = Difficulty.BEGINNER,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """Create a new session for the given preset."""
    logger.debug("Creating %s session", difficulty.value)
    return GameSession(difficulty, rng)
