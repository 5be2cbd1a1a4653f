"""
Connect-K rules: line detection, winner and draw checks.
"""

from typing import Optional

from .board import Board, EMPTY, OPPONENT, SELF

# 4 directions (one per axis)
DIRECTIONS_4 = [
    (0, 1),    # horizontal →
    (1, 0),    # vertical ↓
    (1, 1),    # diagonal ↘
    (1, -1),   # diagonal ↗
]


def default_win_length(size: int) -> int:
    """Three in a row on the classic 3x3 board, five on gomoku boards."""
    return min(5, size)


class Rules:
    """Game rules for connect-K on an N x N board."""

    @staticmethod
    def opposite(mark: int) -> int:
        """Get the opposite mark."""
        return OPPONENT if mark == SELF else SELF

    @staticmethod
    def count_line(board: Board, row: int, col: int, dr: int, dc: int,
                   mark: int) -> tuple:
        """
        Measure the run of `mark` through (row, col) along (dr, dc).
        The cell itself counts as part of the run.

        Returns:
            (length, open_ends) where an end is open if the next cell past
            the run is on the board and empty.
        """
        grid = board.grid
        size = board.size
        count = 1
        open_ends = 0

        # Positive direction
        r, c = row + dr, col + dc
        while 0 <= r < size and 0 <= c < size and grid[r][c] == mark:
            count += 1
            r, c = r + dr, c + dc
        if 0 <= r < size and 0 <= c < size and grid[r][c] == EMPTY:
            open_ends += 1

        # Negative direction
        r, c = row - dr, col - dc
        while 0 <= r < size and 0 <= c < size and grid[r][c] == mark:
            count += 1
            r, c = r - dr, c - dc
        if 0 <= r < size and 0 <= c < size and grid[r][c] == EMPTY:
            open_ends += 1

        return count, open_ends

    @staticmethod
    def creates_line(board: Board, row: int, col: int, mark: int,
                     win_length: int) -> bool:
        """Check if `mark` at (row, col) would complete a winning line."""
        for dr, dc in DIRECTIONS_4:
            count, _ = Rules.count_line(board, row, col, dr, dc, mark)
            if count >= win_length:
                return True
        return False

    @staticmethod
    def get_winning_line(board: Board, win_length: int) -> Optional[list]:
        """
        Find a completed line of at least `win_length` cells.
        Returns the positions of the whole run, or None.
        """
        grid = board.grid
        size = board.size

        for r in range(size):
            for c in range(size):
                mark = grid[r][c]
                if mark == EMPTY:
                    continue
                for dr, dc in DIRECTIONS_4:
                    # Only start from the first cell of a run
                    pr, pc = r - dr, c - dc
                    if 0 <= pr < size and 0 <= pc < size and grid[pr][pc] == mark:
                        continue

                    positions = [(r, c)]
                    nr, nc = r + dr, c + dc
                    while 0 <= nr < size and 0 <= nc < size and grid[nr][nc] == mark:
                        positions.append((nr, nc))
                        nr, nc = nr + dr, nc + dc

                    if len(positions) >= win_length:
                        return positions
        return None

    @staticmethod
    def find_winner(board: Board, win_length: int) -> Optional[int]:
        """Return the mark owning a completed line, or None."""
        line = Rules.get_winning_line(board, win_length)
        if line is None:
            return None
        row, col = line[0]
        return board.grid[row][col]

    @staticmethod
    def is_draw(board: Board, win_length: int) -> bool:
        """Board full with no completed line."""
        return board.is_full() and Rules.find_winner(board, win_length) is None

    @staticmethod
    def get_valid_moves(board: Board) -> list:
        """Get all legal moves in row-major order."""
        return board.empty_cells()

    @staticmethod
    def is_valid_move(board: Board, row: int, col: int) -> bool:
        """Check if a move is on the board and targets an empty cell."""
        return board.is_valid_pos(row, col) and board.grid[row][col] == EMPTY
