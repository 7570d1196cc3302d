"""
Tests for the board model and win/draw detection.
"""

import pytest

from tictactoe.board import Board, Mark, WIN_LINES
from tictactoe.errors import InvalidState
from tictactoe.win_checker import DRAW, Draw, Win, WinChecker, evaluate


def board_with_line(line, mark):
    cells = [None] * 9
    for index in line:
        cells[index] = mark
    return Board.from_cells(cells)


class TestBoard:
    """Board construction and immutability."""

    def test_empty_board(self):
        board = Board.empty()
        assert len(board) == 9
        assert board.get_empty_cells() == list(range(9))
        assert not board.is_full()

    def test_from_cells_accepts_strings_and_empty_markers(self):
        board = Board.from_cells(["X", "o", None, "", " ", ".", Mark.X, "O", None])
        assert board[0] == Mark.X
        assert board[1] == Mark.O
        assert board[6] == Mark.X
        assert board.get_empty_cells() == [2, 3, 4, 5, 8]

    @pytest.mark.parametrize("cells", [
        [None] * 8,
        [None] * 10,
        ["X", "O", "Z", None, None, None, None, None, None],
        [1, None, None, None, None, None, None, None, None],
        "XO.......",
        42,
    ])
    def test_malformed_boards_raise(self, cells):
        with pytest.raises(InvalidState):
            Board.from_cells(cells)

    def test_direct_construction_is_validated(self):
        with pytest.raises(InvalidState):
            Board((None,) * 3)
        with pytest.raises(InvalidState):
            Board(("X",) + (None,) * 8)

    def test_list_cells_are_stored_as_tuple(self):
        board = Board([Mark.X] + [None] * 8)
        assert isinstance(board.cells, tuple)
        assert board == Board((Mark.X,) + (None,) * 8)
        assert {board: "seen"}[Board.empty().place(0, Mark.X)] == "seen"

        with pytest.raises(InvalidState):
            Board(42)

    def test_place_returns_new_board(self):
        board = Board.empty()
        after = board.place(4, Mark.X)

        assert board[4] is None
        assert after[4] == Mark.X
        assert after.get_empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_place_rejects_occupied_and_out_of_range(self):
        board = Board.empty().place(0, Mark.X)
        with pytest.raises(InvalidState):
            board.place(0, Mark.O)
        with pytest.raises(InvalidState):
            board.place(9, Mark.O)
        with pytest.raises(InvalidState):
            board.place(-1, Mark.O)

    def test_row_col_conversion(self):
        assert Board.to_row_col(5) == (1, 2)
        assert Board.to_index(2, 1) == 7

    def test_render_highlights_winning_line(self):
        board = board_with_line((0, 4, 8), Mark.O)
        text = board.render((0, 4, 8))
        assert text.count("[O]") == 3
        assert " 1 " in text

    def test_mark_opposite(self):
        assert Mark.X.opposite() == Mark.O
        assert Mark.O.opposite() == Mark.X


class TestEvaluate:
    """Terminal state detection."""

    def test_catalogue(self):
        assert WIN_LINES == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        )

    @pytest.mark.parametrize("line", WIN_LINES)
    @pytest.mark.parametrize("mark", [Mark.X, Mark.O])
    def test_every_line_wins(self, line, mark):
        assert evaluate(board_with_line(line, mark)) == Win(mark, line)

    def test_first_line_in_catalogue_order_wins(self):
        # Not reachable in a real game, but the order must be stable
        board = ["X", "X", "X",
                 "O", "O", "O",
                 None, None, None]
        assert evaluate(board) == Win(Mark.X, (0, 1, 2))

        board = ["O", "X", "X",
                 "O", "X", None,
                 "O", "X", None]
        assert evaluate(board) == Win(Mark.O, (0, 3, 6))

    def test_full_board_without_line_is_draw(self):
        board = ["X", "O", "X",
                 "X", "O", "O",
                 "O", "X", "X"]
        result = evaluate(board)
        assert result == DRAW
        assert isinstance(result, Draw)

    def test_win_on_full_board_is_not_a_draw(self):
        board = ["X", "O", "X",
                 "O", "X", "O",
                 "O", "X", "X"]
        assert evaluate(board) == Win(Mark.X, (0, 4, 8))

    def test_open_board_without_line_continues(self):
        assert evaluate(Board.empty()) is None
        assert evaluate(["X", "O", None, None, "X", None, None, None, "O"]) is None

    def test_evaluate_does_not_mutate_input(self):
        board = ["X", "X", "X", "O", "O", None, None, None, None]
        before = list(board)
        evaluate(board)
        assert board == before

    def test_malformed_board_raises(self):
        with pytest.raises(InvalidState):
            evaluate(["X", "O"])


class TestWinChecker:
    """WinChecker helpers used by the game controller."""

    def test_winner_and_line(self):
        checker = WinChecker()
        board = board_with_line((2, 5, 8), Mark.O)
        assert checker.check_winner(board) == Mark.O
        assert checker.get_winning_line(board) == (2, 5, 8)
        assert not checker.check_draw(board)

    def test_no_winner(self):
        checker = WinChecker()
        board = Board.empty().place(4, Mark.X)
        assert checker.check_winner(board) is None
        assert checker.get_winning_line(board) is None
        assert not checker.check_draw(board)

    def test_draw(self):
        checker = WinChecker()
        board = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
        assert checker.check_draw(board)
        assert checker.check_winner(board) is None
