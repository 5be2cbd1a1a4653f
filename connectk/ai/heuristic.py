"""
Heuristic evaluation function for connect-K.
Evaluates board positions using run-based pattern scoring.
"""

from ..game.board import Board, EMPTY, SELF
from ..game.rules import DIRECTIONS_4
from .patterns import WIN_SCORE, OPPONENT_WEIGHT, pattern_score


class Heuristic:
    """
    Scores a position from the engine's side: positive favours SELF,
    negative favours OPPONENT.
    """

    WIN_SCORE = WIN_SCORE
    LOSE_SCORE = -WIN_SCORE

    # Non-terminal totals are clamped inside the win band
    MAX_POSITIONAL = WIN_SCORE - 1

    def __init__(self, win_length: int, opponent_weight: int = OPPONENT_WEIGHT):
        self.win_length = win_length
        self.opponent_weight = opponent_weight

    def evaluate(self, board: Board) -> int:
        """
        Evaluate the board position.

        Every maximal run is scored exactly once per direction, from its
        first cell. A completed line short-circuits to WIN_SCORE or
        LOSE_SCORE.
        """
        grid = board.grid
        size = board.size
        win_length = self.win_length
        total = 0

        for r in range(size):
            row = grid[r]
            for c in range(size):
                mark = row[c]
                if mark == EMPTY:
                    continue

                for dr, dc in DIRECTIONS_4:
                    # Skip unless (r, c) starts the run in this direction
                    pr, pc = r - dr, c - dc
                    prev_in = 0 <= pr < size and 0 <= pc < size
                    if prev_in and grid[pr][pc] == mark:
                        continue

                    length = 1
                    nr, nc = r + dr, c + dc
                    while 0 <= nr < size and 0 <= nc < size and grid[nr][nc] == mark:
                        length += 1
                        nr, nc = nr + dr, nc + dc

                    if length >= win_length:
                        return self.WIN_SCORE if mark == SELF else self.LOSE_SCORE

                    open_ends = 0
                    if prev_in and grid[pr][pc] == EMPTY:
                        open_ends += 1
                    if 0 <= nr < size and 0 <= nc < size and grid[nr][nc] == EMPTY:
                        open_ends += 1

                    score = pattern_score(length, open_ends, win_length)
                    if mark == SELF:
                        total += score
                    else:
                        total -= score * self.opponent_weight

        return max(-self.MAX_POSITIONAL, min(self.MAX_POSITIONAL, total))

    def evaluate_move(self, board: Board, row: int, col: int, mark: int) -> int:
        """
        Quick one-ply evaluation of a move (for move ordering).
        The cell is restored before returning.
        """
        with board.placed(row, col, mark):
            return self.evaluate(board)

    def is_decisive(self, score: int) -> bool:
        """True if the score marks a completed line for either side."""
        return abs(score) >= self.WIN_SCORE
