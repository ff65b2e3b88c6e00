"""
Cell module for Minesweeper game.

Represents the value of a single square on the board as a closed set
of variants: unrevealed empty, unrevealed mine, revealed empty,
revealed count and the triggered mine.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """Possible variants of a cell value."""

    EMPTY = auto()
    MINE = auto()
    REVEALED_EMPTY = auto()
    REVEALED_COUNT = auto()
    REVEALED_MINE = auto()


_SYMBOLS = {
    CellKind.EMPTY: "E",
    CellKind.MINE: "M",
    CellKind.REVEALED_EMPTY: "RE",
    CellKind.REVEALED_MINE: "RM",
}

MAX_ADJACENT_MINES = 8


# ============================================================================
# Cell Value
# ============================================================================

@dataclass(frozen=True)
class CellValue:
    """
    Immutable value of a single cell in the Minesweeper grid.

    Attributes:
        kind: Which variant this value is.
        count: Adjacent mine count, only meaningful for REVEALED_COUNT
            (1-8). Zero for every other kind.
    """

    kind: CellKind
    count: int = 0

    def __post_init__(self) -> None:
        """Validate the count payload against the kind."""
        if self.kind == CellKind.REVEALED_COUNT:
            if not 1 <= self.count <= MAX_ADJACENT_MINES:
                raise ValueError(
                    f"Revealed count must be in 1-{MAX_ADJACENT_MINES}, "
                    f"got {self.count}"
                )
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a count")

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellValue":
        """
        Parse a compact symbol ('E', 'M', 'RE', 'RM' or '1'-'8').

        Raises:
            ValueError: If the symbol is not recognised.
        """
        for kind, known in _SYMBOLS.items():
            if symbol == known:
                return cls(kind)
        if symbol.isdigit():
            return revealed_count(int(symbol))
        raise ValueError(f"Unknown cell symbol: {symbol!r}")

    @property
    def symbol(self) -> str:
        """Compact textual form of the value."""
        if self.kind == CellKind.REVEALED_COUNT:
            return str(self.count)
        return _SYMBOLS[self.kind]

    @property
    def is_unrevealed(self) -> bool:
        """Check if the cell is still interactive (empty or mine)."""
        return self.kind in (CellKind.EMPTY, CellKind.MINE)

    @property
    def is_revealed(self) -> bool:
        """Check if the cell has been revealed."""
        return not self.is_unrevealed

    @property
    def is_mine(self) -> bool:
        """Check if the cell holds a mine, triggered or not."""
        return self.kind in (CellKind.MINE, CellKind.REVEALED_MINE)

    @property
    def adjacent_mines(self) -> int:
        """Adjacent mine count of a revealed safe cell (0 if none)."""
        return self.count

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation code.

        Returns:
            -1: Unrevealed cell (empty or mine)
            0-8: Revealed cell with adjacent mine count
            9: Triggered mine
        """
        if self.is_unrevealed:
            return -1
        if self.kind == CellKind.REVEALED_MINE:
            return 9
        return self.count

    def __str__(self) -> str:
        return self.symbol


EMPTY = CellValue(CellKind.EMPTY)
MINE = CellValue(CellKind.MINE)
REVEALED_EMPTY = CellValue(CellKind.REVEALED_EMPTY)
REVEALED_MINE = CellValue(CellKind.REVEALED_MINE)


def revealed_count(count: int) -> CellValue:
    """Build the revealed value for a cell with ``count`` adjacent mines."""
    if count == 0:
        return REVEALED_EMPTY
    return CellValue(CellKind.REVEALED_COUNT, count)
