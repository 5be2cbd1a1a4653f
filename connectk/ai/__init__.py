from .difficulty import Difficulty, MoveSelector, find_best_move
from .engine import SearchEngine, SearchInfo
from .heuristic import Heuristic
from .movegen import MoveGenerator

__all__ = [
    'Difficulty', 'MoveSelector', 'find_best_move',
    'SearchEngine', 'SearchInfo', 'Heuristic', 'MoveGenerator',
]
