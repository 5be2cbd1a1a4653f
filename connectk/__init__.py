"""
Connect-K game-playing engine: tic-tac-toe through gomoku.
"""

from .ai import Difficulty, MoveSelector, find_best_move
from .errors import ConnectKError, InvalidBoardError, OutOfBoundsError
from .game import Board, EMPTY, OPPONENT, SELF

__all__ = [
    'find_best_move', 'Difficulty', 'MoveSelector', 'Board',
    'EMPTY', 'OPPONENT', 'SELF',
    'ConnectKError', 'InvalidBoardError', 'OutOfBoundsError',
]
