"""
Difficulty policy and move selection.
Turns a difficulty level into search parameters and returns the move to play.
"""

import logging
import random
from enum import Enum
from typing import Optional

from ..game.board import Board, EMPTY
from ..game.rules import Rules, default_win_length
from . import tictactoe
from .engine import SearchEngine

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty levels with search depth and random-move chance."""
    EASY = ("easy", 1, 0.4)        # Depth 1, 40% random moves
    NORMAL = ("normal", 3, 0.0)    # Depth 3
    HARD = ("hard", 5, 0.0)        # Depth 5

    def __init__(self, label: str, depth: int, random_move_chance: float):
        self._label = label
        self._depth = depth
        self._random_move_chance = random_move_chance

    @property
    def label(self) -> str:
        return self._label

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def random_move_chance(self) -> float:
        return self._random_move_chance

    @classmethod
    def from_label(cls, label: str) -> 'Difficulty':
        for difficulty in cls:
            if difficulty.label == label.lower():
                return difficulty
        raise ValueError(f"unknown difficulty {label!r}")


class MoveSelector:
    """
    Chooses the engine's move for a difficulty level.

    Holds no game state between calls; `fallback_count` only counts how
    often the last-resort empty-cell scan was needed.
    """

    DEFAULT_TIME_LIMIT = SearchEngine.DEFAULT_TIME_LIMIT

    def __init__(self, win_length: Optional[int] = None,
                 time_limit: float = DEFAULT_TIME_LIMIT,
                 rng: Optional[random.Random] = None,
                 use_exact_solver: bool = True):
        self.win_length = win_length
        self.time_limit = time_limit
        self.rng = rng or random.Random()
        self.use_exact_solver = use_exact_solver
        self.fallback_count = 0
        self.last_engine: Optional[SearchEngine] = None

    def find_best_move(self, board, difficulty: Difficulty) -> Optional[tuple]:
        """
        Get the move to play.

        Args:
            board: Board, or a raw grid of EMPTY/SELF/OPPONENT rows
            difficulty: Difficulty level

        Returns:
            (row, col) of an empty cell, or None if the board is full
        """
        # Boards built with Board(...) skip validation, so check them here too
        board = Board.from_grid(board.grid if isinstance(board, Board) else board)

        win_length = self.win_length or default_win_length(board.size)

        empty = board.empty_cells()
        if not empty:
            logger.debug("board is full, no move")
            return None

        if difficulty.random_move_chance and self.rng.random() < difficulty.random_move_chance:
            move = self.rng.choice(empty)
            logger.info("%s difficulty: playing random move %s", difficulty.label, move)
            return move

        if (self.use_exact_solver and difficulty is not Difficulty.EASY
                and tictactoe.applies_to(board, win_length)):
            move = tictactoe.optimal_move(board, self.rng)
        else:
            engine = SearchEngine(win_length, self.time_limit, self.rng)
            self.last_engine = engine
            move = engine.find_best_move(board, difficulty.depth)

        if move is None or not Rules.is_valid_move(board, *move):
            return self._fallback(board, move)

        logger.debug("%s difficulty: chose %s", difficulty.label, move)
        return move

    def _fallback(self, board: Board, bad_move: Optional[tuple]) -> Optional[tuple]:
        """Scan row-major for any empty cell; reaching this means a search bug."""
        self.fallback_count += 1
        for row in range(board.size):
            for col in range(board.size):
                if board.grid[row][col] == EMPTY:
                    logger.error(
                        "search returned %s on a non-full board; falling back to %s "
                        "(fallback #%d)", bad_move, (row, col), self.fallback_count,
                    )
                    return (row, col)
        logger.error("fallback found no empty cell")
        return None


def find_best_move(board, difficulty: Difficulty = Difficulty.NORMAL,
                   **options) -> Optional[tuple]:
    """
    Pick a move for SELF on `board`.

    A fresh selector is built per call, so searches on independent boards
    share nothing. `options` are passed to MoveSelector (win_length,
    time_limit, rng, use_exact_solver).
    """
    return MoveSelector(**options).find_best_move(board, difficulty)
