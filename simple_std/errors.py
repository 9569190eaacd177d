"""Exception types raised by simple_std."""


class SimpleStdError(Exception):
    """Public umbrella exception for library misuse and I/O faults."""


class InvalidRangeError(SimpleStdError, ValueError):
    """Raised when a half-open integer range cannot be drawn from."""

    def __init__(self, start, end, reason: str = "end must be greater than start"):
        super().__init__(f"invalid range [{start!r}, {end!r}): {reason}")
        self.start = start
        self.end = end


class ConsoleError(SimpleStdError, OSError):
    """Raised when standard input or output cannot be used."""
