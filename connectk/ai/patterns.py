"""
Pattern score table for the connect-K heuristic.
A run is classified by its length relative to the win length and by how
many of its ends are open.
"""

from enum import IntEnum


class PatternScore(IntEnum):
    """Score values for different patterns (named for five-in-a-row)."""
    FIVE = 1_000_000          # Win
    OPEN_FOUR = 100_000       # Unstoppable (opponent must block)
    FOUR = 10_000             # One move from winning
    OPEN_THREE = 1_000        # Two moves from winning, hard to block
    THREE = 100               # Potential
    OPEN_TWO = 50             # Building potential
    TWO = 10                  # Minimal value


WIN_SCORE = int(PatternScore.FIVE)

# Opponent runs weigh double: the engine prefers blocking to building
OPPONENT_WEIGHT = 2

# (moves missing to complete a line, open ends) -> score
SCORE_TABLE = {
    (1, 2): PatternScore.OPEN_FOUR,
    (1, 1): PatternScore.FOUR,
    (2, 2): PatternScore.OPEN_THREE,
    (2, 1): PatternScore.THREE,
    (3, 2): PatternScore.OPEN_TWO,
    (3, 1): PatternScore.TWO,
}

MIN_RUN = 2


def pattern_score(length: int, open_ends: int, win_length: int) -> int:
    """
    Score a single run.

    Args:
        length: Number of same-mark cells in the run
        open_ends: 0, 1 or 2 empty cells bounding the run
        win_length: Cells in a row needed to win

    Returns:
        Unsigned magnitude; WIN_SCORE for a completed line, 0 for dead
        or single-cell runs
    """
    if length >= win_length:
        return WIN_SCORE
    if length < MIN_RUN:
        return 0
    return int(SCORE_TABLE.get((win_length - length, open_ends), 0))
