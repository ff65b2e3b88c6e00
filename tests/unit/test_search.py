"""
Unit tests for the connectivity search.
"""
from minesweeper import Board, create_grid, find_unrevealed, reveal_cell


class TestFindUnrevealed:
    """Test breadth-first focus search."""

    def test_fully_revealed_board_returns_none(self) -> None:
        """Nothing to focus once everything is revealed."""
        board = reveal_cell(create_grid(4), (0, 0))
        assert find_unrevealed(board, (3, 3)) is None

    def test_finds_far_empty_cell(self) -> None:
        """Search crosses revealed cells to reach an empty one."""
        board = Board.from_symbols([
            ["RE", "RE", "RE"],
            ["RE", "RE", "RE"],
            ["RE", "RE", "E"],
        ])
        assert find_unrevealed(board, (0, 0)) == (2, 2)

    def test_mine_counts_as_unrevealed(self) -> None:
        """Mines are valid focus targets."""
        board = Board.from_symbols([["RE", "1"], ["1", "M"]])
        assert find_unrevealed(board, (0, 0)) == (1, 1)

    def test_returns_first_in_frontier_order(self) -> None:
        """Ties resolve by neighbour order, right before up."""
        board = Board.from_symbols([
            ["E", "RE", "RE"],
            ["RE", "RE", "E"],
            ["RE", "RE", "RE"],
        ])
        assert find_unrevealed(board, (1, 1)) == (1, 2)

    def test_start_cell_is_not_returned(self) -> None:
        """The reference cell itself is never a result."""
        board = Board.from_symbols([["E", "RE"], ["RE", "RE"]])
        assert find_unrevealed(board, (0, 0)) is None

    def test_result_is_unrevealed(self, corner_mine_board: Board) -> None:
        """Any result must hold an empty or mine value."""
        board = reveal_cell(corner_mine_board, (1, 0))
        found = find_unrevealed(board, (1, 0))
        assert found is not None
        assert board[found].is_unrevealed
