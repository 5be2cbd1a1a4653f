"""
Search engine for connect-K.
Implements time-bounded minimax with alpha-beta pruning.

The search is an anytime algorithm: the root seeds its answer with the
first ordered candidate, so a deadline hit at any point still yields a
legal move.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from ..game.board import Board, SELF, OPPONENT
from .heuristic import Heuristic
from .movegen import MoveGenerator

logger = logging.getLogger(__name__)


@dataclass
class SearchInfo:
    """Debug information from the last search."""
    thinking_time: float = 0.0
    search_depth: int = 0
    nodes_evaluated: int = 0
    nodes_per_second: float = 0.0
    best_move: Optional[tuple] = None
    best_score: int = 0
    root_moves: int = 0
    root_moves_searched: int = 0
    cutoffs: int = 0
    timed_out: bool = False


class SearchEngine:
    """
    Connect-K AI using alpha-beta minimax with heuristic move ordering.

    The board passed to find_best_move is mutated during the search and
    restored before it returns, so it must not be shared with another
    thread for the duration of the call.
    """

    # Score bounds
    INF = 10_000_000

    # Default settings
    DEFAULT_TIME_LIMIT = 1.0
    DEFAULT_DEPTH = 3

    def __init__(self, win_length: int, time_limit: float = DEFAULT_TIME_LIMIT,
                 rng: Optional[random.Random] = None,
                 radius: int = MoveGenerator.DEFAULT_RADIUS):
        self.heuristic = Heuristic(win_length)
        self.move_gen = MoveGenerator(self.heuristic, radius)
        self.rng = rng or random.Random()

        # Configurable settings
        self.win_length = win_length
        self.time_limit = time_limit

        # Search state
        self.node_count = 0
        self.cutoffs = 0
        self.start_time = 0.0
        self.deadline = 0.0
        self.should_stop = False

        self.debug_info = SearchInfo()

    def stop(self):
        """Ask a running search to return its best move so far."""
        self.should_stop = True

    def find_best_move(self, board: Board, depth: int = DEFAULT_DEPTH,
                       time_limit: Optional[float] = None) -> Optional[tuple]:
        """
        Get the best move for SELF in the given position.

        Args:
            board: Current board, borrowed for the duration of the call
            depth: Plies to search (at least 1)
            time_limit: Seconds before the search returns its best answer so far

        Returns:
            (row, col) tuple for the best move, or None if the board is full
        """
        if time_limit is None:
            time_limit = self.time_limit
        depth = max(1, depth)

        self.start_time = time.time()
        self.deadline = self.start_time + time_limit
        self.should_stop = False
        self.node_count = 0
        self.cutoffs = 0
        self.debug_info = SearchInfo(search_depth=depth)

        moves = self.move_gen.get_moves(board, SELF, self.rng)
        if not moves:
            return None

        # Seeded so that a deadline before the first subtree still answers
        best_move = moves[0]
        best_score = -self.INF
        alpha = -self.INF
        searched = 0

        for row, col in moves:
            if self._should_stop():
                break

            with board.placed(row, col, SELF):
                score = self._minimax(board, depth - 1, alpha, self.INF,
                                      maximizing=False, ply=1)

            # A subtree cut short by the deadline must not replace a fully
            # searched answer
            if self.should_stop and best_score > -self.INF:
                break

            searched += 1
            if score > best_score:
                best_score = score
                best_move = (row, col)
            alpha = max(alpha, best_score)

        self._finish(best_move, best_score, len(moves), searched)
        return best_move

    def _minimax(self, board: Board, depth: int, alpha: int, beta: int,
                 maximizing: bool, ply: int) -> int:
        """
        Alpha-beta minimax from SELF's point of view.

        Every mark placed here is cleared by board.placed before the
        frame returns, including on cutoffs.
        """
        self.node_count += 1
        score = self.heuristic.evaluate(board)

        if self._should_stop():
            return self._distance_adjusted(score, ply)
        if depth <= 0:
            return self._distance_adjusted(score, ply)
        if self.heuristic.is_decisive(score):
            return self._distance_adjusted(score, ply)

        mark = SELF if maximizing else OPPONENT
        moves = self.move_gen.get_moves(board, mark, self.rng)
        if not moves:
            return 0

        if maximizing:
            best = -self.INF
            for row, col in moves:
                with board.placed(row, col, SELF):
                    best = max(best, self._minimax(board, depth - 1, alpha, beta, False, ply + 1))
                if self.should_stop:
                    break
                alpha = max(alpha, best)
                if beta <= alpha:
                    self.cutoffs += 1
                    break
            return best

        best = self.INF
        for row, col in moves:
            with board.placed(row, col, OPPONENT):
                best = min(best, self._minimax(board, depth - 1, alpha, beta, True, ply + 1))
            if self.should_stop:
                break
            beta = min(beta, best)
            if beta <= alpha:
                self.cutoffs += 1
                break
        return best

    def _distance_adjusted(self, score: int, ply: int) -> int:
        """Prefer faster wins and slower losses."""
        if score >= self.heuristic.WIN_SCORE:
            return score - ply
        if score <= self.heuristic.LOSE_SCORE:
            return score + ply
        return score

    def _should_stop(self) -> bool:
        """Check if search should stop due to time limit or cancellation."""
        if self.should_stop:
            return True
        if time.time() >= self.deadline:
            self.should_stop = True
            return True
        return False

    def _finish(self, best_move: tuple, best_score: int, root_moves: int,
                searched: int):
        elapsed = time.time() - self.start_time
        info = self.debug_info
        info.thinking_time = elapsed
        info.nodes_evaluated = self.node_count
        info.nodes_per_second = self.node_count / elapsed if elapsed > 0 else 0
        info.best_move = best_move
        info.best_score = best_score if searched else 0
        info.root_moves = root_moves
        info.root_moves_searched = searched
        info.cutoffs = self.cutoffs
        info.timed_out = self.should_stop

        logger.debug(
            "search depth=%d move=%s score=%d nodes=%d cutoffs=%d time=%.3fs%s",
            info.search_depth, best_move, info.best_score, self.node_count,
            self.cutoffs, elapsed, " (deadline hit)" if info.timed_out else "",
        )

    def get_debug_info(self) -> dict:
        """Get debug information as dictionary."""
        return {
            'thinking_time': self.debug_info.thinking_time,
            'search_depth': self.debug_info.search_depth,
            'nodes_evaluated': self.debug_info.nodes_evaluated,
            'nodes_per_second': self.debug_info.nodes_per_second,
            'best_move': self.debug_info.best_move,
            'best_score': self.debug_info.best_score,
            'root_moves': self.debug_info.root_moves,
            'root_moves_searched': self.debug_info.root_moves_searched,
            'cutoffs': self.debug_info.cutoffs,
            'timed_out': self.debug_info.timed_out,
        }
