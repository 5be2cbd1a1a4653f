"""Tests for connect-K rules."""

import sys
sys.path.insert(0, '.')

from connectk.game.board import Board, EMPTY, OPPONENT, SELF
from connectk.game.rules import Rules, default_win_length

S, P, E = SELF, OPPONENT, EMPTY


class TestWinLength:

    def test_default_win_length(self):
        assert default_win_length(3) == 3
        assert default_win_length(4) == 4
        assert default_win_length(15) == 5
        assert default_win_length(19) == 5


class TestLines:
    """Line measurement and completion."""

    def test_count_line_open_both_ends(self):
        board = Board.empty(9)
        board.set(4, 3, SELF)
        board.set(4, 5, SELF)
        # (4, 4) joins the two marks into a run of three
        assert Rules.count_line(board, 4, 4, 0, 1, SELF) == (3, 2)

    def test_count_line_blocked_and_edge(self):
        board = Board.empty(9)
        board.set(0, 1, SELF)
        board.set(0, 2, SELF)
        board.set(0, 3, OPPONENT)
        assert Rules.count_line(board, 0, 0, 0, 1, SELF) == (3, 0)

    def test_creates_line(self):
        board = Board([[S, S, E],
                       [P, P, E],
                       [E, E, E]])
        assert Rules.creates_line(board, 0, 2, SELF, 3)
        assert Rules.creates_line(board, 1, 2, OPPONENT, 3)
        assert not Rules.creates_line(board, 2, 2, SELF, 3)

    def test_creates_line_diagonal(self):
        board = Board.empty(9)
        for i in range(4):
            board.set(1 + i, 1 + i, OPPONENT)
        assert Rules.creates_line(board, 5, 5, OPPONENT, 5)
        assert Rules.creates_line(board, 0, 0, OPPONENT, 5)
        assert not Rules.creates_line(board, 5, 5, SELF, 5)


class TestWinner:
    """Winner and draw detection."""

    def test_no_winner_on_empty_board(self):
        board = Board.empty(3)
        assert Rules.find_winner(board, 3) is None
        assert Rules.get_winning_line(board, 3) is None
        assert not Rules.is_draw(board, 3)

    def test_row_winner(self):
        board = Board([[P, P, P],
                       [S, S, E],
                       [E, E, E]])
        assert Rules.find_winner(board, 3) == OPPONENT
        assert Rules.get_winning_line(board, 3) == [(0, 0), (0, 1), (0, 2)]

    def test_anti_diagonal_winner(self):
        board = Board([[P, P, S],
                       [E, S, E],
                       [S, E, P]])
        assert Rules.find_winner(board, 3) == SELF
        assert sorted(Rules.get_winning_line(board, 3)) == [(0, 2), (1, 1), (2, 0)]

    def test_five_on_large_board(self):
        board = Board.empty(15)
        for i in range(5):
            board.set(3 + i, 7, SELF)
        assert Rules.find_winner(board, 5) == SELF
        assert Rules.get_winning_line(board, 5) == [(3 + i, 7) for i in range(5)]

    def test_four_is_not_a_win(self):
        board = Board.empty(15)
        for i in range(4):
            board.set(7, 3 + i, OPPONENT)
        assert Rules.find_winner(board, 5) is None

    def test_overline_wins(self):
        board = Board.empty(15)
        for i in range(6):
            board.set(7, 3 + i, OPPONENT)
        assert Rules.find_winner(board, 5) == OPPONENT
        assert len(Rules.get_winning_line(board, 5)) == 6

    def test_draw(self):
        board = Board([[S, P, S],
                       [S, P, P],
                       [P, S, S]])
        assert Rules.find_winner(board, 3) is None
        assert Rules.is_draw(board, 3)

    def test_valid_moves(self):
        board = Board([[S, P, S],
                       [S, E, P],
                       [P, S, E]])
        assert Rules.get_valid_moves(board) == [(1, 1), (2, 2)]
        assert Rules.is_valid_move(board, 1, 1)
        assert not Rules.is_valid_move(board, 0, 0)
        assert not Rules.is_valid_move(board, 3, 3)

    def test_opposite(self):
        assert Rules.opposite(SELF) == OPPONENT
        assert Rules.opposite(OPPONENT) == SELF


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
