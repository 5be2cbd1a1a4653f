"""Tests for the rule-based 3x3 solver."""

import random
import sys
sys.path.insert(0, '.')

import pytest

from connectk.ai import tictactoe
from connectk.game.board import Board, EMPTY, OPPONENT, SELF

S, P, E = SELF, OPPONENT, EMPTY


class TestOptimalMove:
    """Win, block, then the best move under perfect play."""

    def test_empty_board_takes_center(self):
        assert tictactoe.optimal_move(Board.empty(3)) == (1, 1)

    def test_win_before_block(self):
        board = Board([[P, P, E],
                       [S, S, E],
                       [E, E, E]])
        assert tictactoe.optimal_move(board) == (1, 2)

    def test_blocks_opponent(self):
        board = Board([[P, E, E],
                       [E, S, E],
                       [E, E, P]])
        board.set(0, 1, OPPONENT)
        assert tictactoe.optimal_move(board) == (0, 2)

    def test_takes_corner_when_quiet(self):
        board = Board([[E, E, E],
                       [E, P, E],
                       [E, E, E]])
        assert tictactoe.optimal_move(board, random.Random(4)) in tictactoe.CORNERS

    def test_takes_edge_when_corners_gone(self):
        board = Board([[P, E, S],
                       [E, S, E],
                       [P, E, P]])
        # Opponent threatens (1, 0); block wins over everything else
        assert tictactoe.optimal_move(board) == (1, 0)

        board = Board([[S, P, S],
                       [E, P, E],
                       [P, S, P]])
        assert tictactoe.optimal_move(board, random.Random(0)) in [(1, 0), (1, 2)]

    def test_full_board(self):
        board = Board([[S, P, S],
                       [S, P, P],
                       [P, S, S]])
        assert tictactoe.optimal_move(board) is None

    def test_board_untouched(self):
        board = Board([[P, P, E],
                       [E, S, E],
                       [E, E, E]])
        before = board.snapshot()
        tictactoe.optimal_move(board)
        assert board.snapshot() == before

    def test_rejects_other_sizes(self):
        with pytest.raises(ValueError):
            tictactoe.optimal_move(Board.empty(4))

    def test_win_over_center(self):
        board = Board([[S, S, E],
                       [E, E, P],
                       [P, E, E]])
        assert tictactoe.optimal_move(board) == (0, 2)

    def test_block_over_center(self):
        board = Board([[P, P, E],
                       [E, E, S],
                       [S, E, E]])
        assert tictactoe.optimal_move(board) == (0, 2)

    @pytest.mark.parametrize("seed", range(5))
    def test_opposite_corners_answered_with_edge(self, seed):
        """A corner reply here lets the opponent fork."""
        board = Board([[P, E, E],
                       [E, S, E],
                       [E, E, P]])
        assert tictactoe.optimal_move(board, random.Random(seed)) in tictactoe.EDGES

    def test_move_outcome(self):
        assert tictactoe.move_outcome(Board.empty(3), 1, 1) == 0
        board = Board([[E, E, E],
                       [E, P, E],
                       [E, E, E]])
        # An edge reply to the centre opening loses
        assert tictactoe.move_outcome(board, 0, 1) == -1
        assert tictactoe.move_outcome(board, 0, 0) == 0

    def test_applies_to(self):
        assert tictactoe.applies_to(Board.empty(3), 3)
        assert not tictactoe.applies_to(Board.empty(3), 2)
        assert not tictactoe.applies_to(Board.empty(15), 5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
