"""
Exception hierarchy for the connect-K engine.

A full board is not an error: searches report it by returning None.
"""


class ConnectKError(Exception):
    """Base class for all engine errors."""


class InvalidBoardError(ConnectKError, ValueError):
    """The grid handed to the engine is empty, ragged, non-square or holds unknown marks."""


class OutOfBoundsError(ConnectKError, IndexError):
    """A coordinate falls outside the board."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size
