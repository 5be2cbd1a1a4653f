"""
Move generation and ordering for the connect-K AI.
Restricts candidates to cells near existing marks and orders them by a
one-ply heuristic so alpha-beta prunes early.
"""

import random
from typing import Optional

from ..game.board import Board, EMPTY, SELF
from .heuristic import Heuristic


class MoveGenerator:
    """
    Generates and orders moves for the AI.
    """

    # Chebyshev distance from an existing mark
    DEFAULT_RADIUS = 2

    def __init__(self, heuristic: Heuristic, radius: int = DEFAULT_RADIUS):
        if radius < 1:
            raise ValueError(f"radius must be at least 1, got {radius}")
        self.heuristic = heuristic
        self.radius = radius

    def get_candidates(self, board: Board) -> list:
        """
        Empty cells within `radius` of any mark, in row-major order.

        An empty board yields its centre. With radius >= 1 a board that still
        has empty cells always has one next to a mark, so an empty result
        means the board is full.
        """
        grid = board.grid
        size = board.size
        radius = self.radius
        candidates = set()
        has_stones = False

        for row in range(size):
            for col in range(size):
                if grid[row][col] == EMPTY:
                    continue
                has_stones = True
                for nr in range(max(0, row - radius), min(size, row + radius + 1)):
                    for nc in range(max(0, col - radius), min(size, col + radius + 1)):
                        if grid[nr][nc] == EMPTY:
                            candidates.add((nr, nc))

        if not has_stones:
            center = size // 2
            return [(center, center)]

        return sorted(candidates)

    def get_moves(self, board: Board, mark: int,
                  rng: Optional[random.Random] = None) -> list:
        """
        Get ordered list of candidate moves for `mark`.

        Candidates are shuffled first so equal scores do not always favour
        the same corner of the board, then stable-sorted by the position
        score after the move: highest first for SELF, lowest first for
        OPPONENT.

        Returns:
            List of (row, col) tuples, ordered by expected quality
        """
        moves = self.get_candidates(board)
        if len(moves) <= 1:
            return moves

        (rng or random).shuffle(moves)

        scores = {
            move: self.heuristic.evaluate_move(board, move[0], move[1], mark)
            for move in moves
        }
        moves.sort(key=scores.__getitem__, reverse=(mark == SELF))
        return moves
