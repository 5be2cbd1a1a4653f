#!/usr/bin/env python3
"""
Connect-K - engine vs engine
Headless runner that plays one game between two AI players and prints it.
"""

import argparse
import logging
import sys

from connectk.ai.difficulty import Difficulty
from connectk.selfplay import play_match

DIFFICULTY_LABELS = [d.label for d in Difficulty]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play an engine-vs-engine connect-K game.")
    parser.add_argument("--size", type=int, default=3, help="board side (default: 3)")
    parser.add_argument("--win-length", type=int, default=None,
                        help="marks in a row to win (default: 3 on 3x3, else 5)")
    parser.add_argument("--x", dest="x_difficulty", choices=DIFFICULTY_LABELS, default="hard")
    parser.add_argument("--o", dest="o_difficulty", choices=DIFFICULTY_LABELS, default="hard")
    parser.add_argument("--time-limit", type=float, default=1.0,
                        help="seconds per move (default: 1.0)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="log every move")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        state = play_match(
            size=args.size,
            x_difficulty=Difficulty.from_label(args.x_difficulty),
            o_difficulty=Difficulty.from_label(args.o_difficulty),
            win_length=args.win_length,
            time_limit=args.time_limit,
            seed=args.seed,
        )
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        sys.exit(0)

    print(state)
    print(f"{state.winner} wins" if state.winner else "Draw")


if __name__ == "__main__":
    main()
