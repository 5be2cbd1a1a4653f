"""
Engine-vs-engine matches.
Keeps a board of display marks ("X", "O"), translates it to the engine's
point of view before every move, and checks for a winner afterwards.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .ai.difficulty import Difficulty, MoveSelector
from .game.board import Board
from .game.rules import Rules, default_win_length

logger = logging.getLogger(__name__)

X_MARK = "X"
O_MARK = "O"
NO_MARK = ""


@dataclass
class MoveRecord:
    """Record of a single move."""
    row: int
    col: int
    symbol: str


class GameState:
    """
    State of one local game: marks on the board, whose turn, result.
    X always moves first.
    """

    def __init__(self, size: int = 3, win_length: Optional[int] = None):
        self.size = size
        self.win_length = win_length or default_win_length(size)
        self.reset()

    def reset(self):
        self.cells = [[NO_MARK] * self.size for _ in range(self.size)]
        self.current_turn = X_MARK
        self.move_history: list[MoveRecord] = []
        self.winner = NO_MARK
        self.is_game_over = False

    def board_for(self, symbol: str) -> Board:
        """Engine view of the position with `symbol` as SELF."""
        return Board.from_symbols(self.cells, me=symbol, empty=NO_MARK)

    def make_move(self, row: int, col: int) -> bool:
        """
        Play the current side's mark.
        Returns False if the game is over or the cell is not free.
        """
        if self.is_game_over:
            return False
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        if self.cells[row][col] != NO_MARK:
            return False

        symbol = self.current_turn
        self.cells[row][col] = symbol
        self.move_history.append(MoveRecord(row, col, symbol))
        self._update_result(symbol)

        if not self.is_game_over:
            self.current_turn = O_MARK if symbol == X_MARK else X_MARK
        return True

    def undo_move(self) -> Optional[MoveRecord]:
        """Undo the last move. Returns the record or None if no history."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.cells[record.row][record.col] = NO_MARK
        self.current_turn = record.symbol
        self.winner = NO_MARK
        self.is_game_over = False
        return record

    def _update_result(self, symbol: str):
        board = self.board_for(symbol)
        if Rules.find_winner(board, self.win_length) is not None:
            self.winner = symbol
            self.is_game_over = True
        elif board.is_full():
            self.is_game_over = True

    @property
    def is_draw(self) -> bool:
        return self.is_game_over and self.winner == NO_MARK

    def __str__(self) -> str:
        return '\n'.join(
            ' '.join(cell or '.' for cell in row) for row in self.cells
        )


def play_match(size: int = 3, x_difficulty: Difficulty = Difficulty.HARD,
               o_difficulty: Difficulty = Difficulty.HARD,
               win_length: Optional[int] = None,
               time_limit: float = MoveSelector.DEFAULT_TIME_LIMIT,
               seed: Optional[int] = None) -> GameState:
    """
    Play a full game between two engine players and return the final state.
    """
    state = GameState(size, win_length)
    rng = random.Random(seed)
    players = {
        X_MARK: (MoveSelector(state.win_length, time_limit, rng), x_difficulty),
        O_MARK: (MoveSelector(state.win_length, time_limit, rng), o_difficulty),
    }

    while not state.is_game_over:
        symbol = state.current_turn
        selector, difficulty = players[symbol]
        move = selector.find_best_move(state.board_for(symbol), difficulty)
        if move is None:
            break
        state.make_move(*move)
        logger.debug("%s plays %s", symbol, move)

    logger.info(
        "match over after %d moves: %s", len(state.move_history),
        f"{state.winner} wins" if state.winner else "draw",
    )
    return state
