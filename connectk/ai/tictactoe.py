"""
Exact play for classic 3x3 tic-tac-toe.

Faster than the general search on the smallest board: take a win, then
block, then pick a move whose perfect-play outcome is best, preferring
the centre, then corners, then edges.
"""

import logging
import random
from functools import lru_cache
from typing import Optional

from ..game.board import Board, EMPTY, SELF, OPPONENT
from ..game.rules import Rules

logger = logging.getLogger(__name__)

SIZE = 3
WIN_LENGTH = 3

CENTER = (1, 1)
CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]
EDGES = [(0, 1), (1, 0), (1, 2), (2, 1)]

# Cell indices of every line on a flattened 3x3 board
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def applies_to(board: Board, win_length: int) -> bool:
    """True for a 3x3 board played to three in a row."""
    return board.size == SIZE and win_length == WIN_LENGTH


def _completing_move(board: Board, mark: int) -> Optional[tuple]:
    """First empty cell (row-major) where `mark` completes a line."""
    for row, col in board.empty_cells():
        if Rules.creates_line(board, row, col, mark, WIN_LENGTH):
            return (row, col)
    return None


def _line_owner(cells: tuple) -> Optional[int]:
    for a, b, c in LINES:
        if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
            return cells[a]
    return None


@lru_cache(maxsize=None)
def _outcome(cells: tuple, to_move: int) -> int:
    """
    Result for SELF when both sides play perfectly from `cells`.
    1 is a win, 0 a draw, -1 a loss.
    """
    owner = _line_owner(cells)
    if owner is not None:
        return 1 if owner == SELF else -1
    if EMPTY not in cells:
        return 0

    following = Rules.opposite(to_move)
    results = [
        _outcome(cells[:i] + (to_move,) + cells[i + 1:], following)
        for i, cell in enumerate(cells)
        if cell == EMPTY
    ]
    return max(results) if to_move == SELF else min(results)


def move_outcome(board: Board, row: int, col: int) -> int:
    """Perfect-play result for SELF after SELF plays (row, col)."""
    cells = [cell for line in board.grid for cell in line]
    cells[row * SIZE + col] = SELF
    return _outcome(tuple(cells), OPPONENT)


def optimal_move(board: Board, rng: Optional[random.Random] = None) -> Optional[tuple]:
    """
    Pick a move for SELF on a 3x3 board.

    Never loses a game that can still be drawn. Among equally good moves
    the centre comes first, then a random corner, then a random edge.

    Returns:
        (row, col) tuple, or None if the board is full
    """
    if board.size != SIZE:
        raise ValueError(f"tic-tac-toe solver needs a {SIZE}x{SIZE} board, got {board.size}")

    rng = rng or random

    empty = board.empty_cells()
    if not empty:
        return None

    move = _completing_move(board, SELF)
    if move:
        logger.debug("winning move at %s", move)
        return move

    move = _completing_move(board, OPPONENT)
    if move:
        logger.debug("blocking opponent at %s", move)
        return move

    outcomes = {cell: move_outcome(board, *cell) for cell in empty}
    best = max(outcomes.values())

    corners = CORNERS[:]
    edges = EDGES[:]
    rng.shuffle(corners)
    rng.shuffle(edges)
    for cell in [CENTER] + corners + edges:
        if outcomes.get(cell) == best:
            logger.debug("taking %s (outcome %d)", cell, best)
            return cell

    # Unreachable on a 3x3 board: centre, corners and edges cover every cell
    return empty[0]
