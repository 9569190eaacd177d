"""Play guess-the-number on the console."""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from simple_std import ConsoleError, play_guessing_game, random_int_range, seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Guess the hidden number")
    parser.add_argument("--low", type=int, default=0, help="Smallest possible number")
    parser.add_argument("--high", type=int, default=100, help="One past the largest possible number")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Seed for a repeatable game (accepts decimal or 0x-prefixed hex)",
    )
    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if args.high <= args.low:
        parser.error("--high must be greater than --low")

    seed(args.seed)
    secret = random_int_range(args.low, args.high)
    try:
        guesses = play_guessing_game(secret)
    except ConsoleError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1

    print(f"Found it in {guesses} guesses.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
