"""
Board model for connect-K games.
N x N grid of cells seen from the engine's side: empty, own mark, opponent mark.
"""

from contextlib import contextmanager
from typing import Iterator

from ..errors import InvalidBoardError, OutOfBoundsError

EMPTY = 0
OPPONENT = 1
SELF = 2

CELL_STATES = (EMPTY, OPPONENT, SELF)

MIN_SIZE = 3


class Board:
    """
    Square grid stored as a list of rows.

    The rows are borrowed from the caller: the engine places speculative
    marks on them while searching and clears every one before returning.
    """

    def __init__(self, grid: list):
        self.grid = grid
        self.size = len(grid)

    @classmethod
    def empty(cls, size: int) -> 'Board':
        """Create a fresh empty board of the given side."""
        return cls.from_grid([[EMPTY] * size for _ in range(size)])

    @classmethod
    def from_grid(cls, grid) -> 'Board':
        """
        Wrap a caller-owned grid without copying it.
        Raises InvalidBoardError if the grid is not a square of known cell states.
        """
        if not isinstance(grid, list) or not grid:
            raise InvalidBoardError("board must be a non-empty list of rows")

        size = len(grid)
        if size < MIN_SIZE:
            raise InvalidBoardError(f"board side must be at least {MIN_SIZE}, got {size}")

        for index, row in enumerate(grid):
            if not isinstance(row, list):
                raise InvalidBoardError(f"row {index} is not a list")
            if len(row) != size:
                raise InvalidBoardError(
                    f"row {index} has {len(row)} cells, expected {size} (board must be square)"
                )
            for cell in row:
                if cell not in CELL_STATES:
                    raise InvalidBoardError(f"unknown cell value {cell!r} in row {index}")

        return cls(grid)

    @classmethod
    def from_symbols(cls, rows, me, empty="") -> 'Board':
        """
        Translate a board of display marks (e.g. "X"/"O") into engine cells.
        `me` becomes SELF, `empty` becomes EMPTY, any other mark is OPPONENT.
        """
        if not rows:
            raise InvalidBoardError("board must be a non-empty list of rows")

        grid = []
        for row in rows:
            grid.append([
                EMPTY if cell == empty else SELF if cell == me else OPPONENT
                for cell in row
            ])
        return cls.from_grid(grid)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board([row[:] for row in self.grid])

    def is_valid_pos(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int):
        if not self.is_valid_pos(row, col):
            raise OutOfBoundsError(row, col, self.size)

    def get(self, row: int, col: int) -> int:
        """Get cell at position. Returns EMPTY, SELF or OPPONENT."""
        self._check_bounds(row, col)
        return self.grid[row][col]

    def set(self, row: int, col: int, state: int):
        """Overwrite a cell."""
        self._check_bounds(row, col)
        if state not in CELL_STATES:
            raise ValueError(f"unknown cell state {state!r}")
        self.grid[row][col] = state

    def is_empty(self, row: int, col: int) -> bool:
        """Check if position is empty."""
        return self.get(row, col) == EMPTY

    def place_stone(self, row: int, col: int, mark: int) -> bool:
        """
        Place a mark on the board.
        Returns True if successful, False if position is occupied or off the board.
        """
        if not self.is_valid_pos(row, col):
            return False
        if self.grid[row][col] != EMPTY:
            return False
        self.grid[row][col] = mark
        return True

    def remove_stone(self, row: int, col: int) -> int:
        """
        Clear a cell.
        Returns the mark that was removed.
        """
        self._check_bounds(row, col)
        mark = self.grid[row][col]
        self.grid[row][col] = EMPTY
        return mark

    @contextmanager
    def placed(self, row: int, col: int, mark: int) -> Iterator['Board']:
        """
        Temporarily place a mark; the cell is emptied again on exit,
        whatever way the block is left.
        """
        self.grid[row][col] = mark
        try:
            yield self
        finally:
            self.grid[row][col] = EMPTY

    def empty_cells(self) -> list:
        """All empty positions in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell == EMPTY
        ]

    def occupied_cells(self) -> list:
        """All occupied positions in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell != EMPTY
        ]

    def is_full(self) -> bool:
        return all(cell != EMPTY for row in self.grid for cell in row)

    def count_stones(self, mark: int) -> int:
        """Count number of cells holding a mark."""
        return sum(row.count(mark) for row in self.grid)

    def snapshot(self) -> tuple:
        """Immutable copy of the cells, for before/after comparisons."""
        return tuple(tuple(row) for row in self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {EMPTY: '.', OPPONENT: 'X', SELF: 'O'}
        lines = ['   ' + ' '.join(f'{i:2d}' for i in range(self.size))]

        for r, row in enumerate(self.grid):
            lines.append(f'{r:2d} ' + ''.join(f' {symbols[cell]} ' for cell in row))

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Board(size={self.size}, stones={len(self.occupied_cells())})'
