"""
Unit tests for the cascading reveal.
"""
from minefield import Board, CellState, place_mines, reveal


def _board(width: int, height: int, mines=()) -> Board:
    board = Board(width, height)
    place_mines(board, mines)
    return board


class TestCascadeReveal:
    """Test flood fill over zero cells."""

    def test_empty_board_reveals_everything(self) -> None:
        board = _board(5, 5)
        revealed = reveal(board, 12)
        assert revealed == set(range(25))
        assert board.count(CellState.REVEALED) == 25

    def test_numbered_cell_does_not_expand(self) -> None:
        board = _board(3, 3, mines=[0])
        assert reveal(board, 4) == {4}
        assert board[5].is_hidden is True

    def test_cascade_stops_at_numbered_cells(self) -> None:
        """
        Layout (M = mine):
            M 1 0 0
            1 1 0 0
            0 0 1 1
            0 0 1 M
        """
        board = _board(4, 4, mines=[0, 15])
        revealed = reveal(board, 3)
        assert revealed == set(range(1, 15))
        assert board[0].is_hidden is True
        assert board[15].is_hidden is True

    def test_cascade_is_bounded_by_walls_of_numbers(self) -> None:
        """A column of mines splits the board in two regions."""
        board = _board(5, 3, mines=[2, 7, 12])
        revealed = reveal(board, 0)
        assert revealed == {0, 1, 5, 6, 10, 11}
        assert all(board[i].is_hidden for i in (3, 4, 8, 9, 13, 14))

    def test_second_reveal_is_noop(self) -> None:
        board = _board(4, 4, mines=[0, 15])
        reveal(board, 3)
        before = [cell.state for cell in board]
        assert reveal(board, 3) == set()
        assert reveal(board, 5) == set()
        assert [cell.state for cell in board] == before

    def test_flagged_cells_are_revealed_by_cascade(self) -> None:
        board = _board(3, 1)
        board[2].toggle_flag()
        assert reveal(board, 0) == {0, 1, 2}
        assert board[2].is_revealed is True

    def test_mine_is_not_checked(self) -> None:
        """Revealing an isolated mine with a zero count still expands."""
        board = _board(3, 3, mines=[4])
        board[4].adjacent_mines = 0
        assert reveal(board, 4) == set(range(9))

    def test_large_board_does_not_recurse(self) -> None:
        board = _board(300, 300)
        assert len(reveal(board, 0)) == 90000
