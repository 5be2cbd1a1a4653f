from .board import Board, EMPTY, OPPONENT, SELF
from .rules import Rules, default_win_length

__all__ = ['Board', 'Rules', 'default_win_length', 'EMPTY', 'OPPONENT', 'SELF']
