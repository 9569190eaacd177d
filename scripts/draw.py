"""Command line harness that draws a batch of random values."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from simple_std import DrawConfig, InvalidRangeError, run_draws
from simple_std.prng import check_range


def _parse_range(value: str) -> tuple[int, int]:
    """Parse a CLI `START..END` (or `START:END`) half-open range."""

    separator = ".." if ".." in value else ":"
    start_text, found, end_text = value.partition(separator)
    if not found:
        raise argparse.ArgumentTypeError(
            f"Expected a range like 0..100 or 0:100, received '{value}'."
        )

    try:
        start, end = int(start_text.strip(), 0), int(end_text.strip(), 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Range bounds must be integers.") from exc

    try:
        check_range(start, end)
    except InvalidRangeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    return start, end


def _parse_count(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be zero or a positive integer.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw casual pseudo-random numbers")
    parser.add_argument("--count", type=_parse_count, default=10, help="Number of values to draw")
    parser.add_argument(
        "--range",
        dest="bounds",
        metavar="START..END",
        type=_parse_range,
        default=(0, 100),
        help="Half-open integer range to draw from (e.g. 0..100, or --range=-5:5 for negatives)",
    )
    parser.add_argument(
        "--float",
        dest="kind",
        action="store_const",
        const="float",
        default="int",
        help="Draw floats in [0, 1) instead of integers",
    )
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=None,
        help="Seed for a reproducible batch (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    start, end = args.bounds
    cfg = DrawConfig(
        seed=args.seed,
        count=args.count,
        start=start,
        end=end,
        kind=args.kind,
    )
    result = run_draws(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
