"""Line-based console helpers in the spirit of Python's ``input``."""

from __future__ import annotations

import sys

from .errors import ConsoleError


def input() -> str:
    """Read one line from stdin, keeping the trailing newline.

    Returns ``""`` at end of stream. Raises ``ConsoleError`` if stdin is
    closed or the read fails.
    """
    try:
        return sys.stdin.readline()
    except (OSError, ValueError) as exc:
        raise ConsoleError(f"could not read from stdin: {exc}") from exc


def prompt(message: str) -> str:
    """Write ``message`` without a newline, flush, then read a line."""
    try:
        sys.stdout.write(message)
        sys.stdout.flush()
    except (OSError, ValueError) as exc:
        raise ConsoleError(f"could not write prompt to stdout: {exc}") from exc
    return input()
