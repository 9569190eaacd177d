"""xorshift128+ generator with float and ranged-integer helpers.

Not cryptographically secure. The module-level ``random_float`` and
``random_int_range`` share one process-wide generator that is seeded from
the clock on first use; pass a ``Xorshift128Plus`` around instead when a
reproducible stream is needed.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from .errors import InvalidRangeError

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
MAX_RANGE_WIDTH = 1 << 31


def time_seed() -> int:
    """More or less random 64-bit value taken from the system clock."""
    micros = time.time_ns() // 1000
    nanos = time.time_ns()
    return (micros ^ nanos) & MASK64


def _splitmix64(state: int) -> tuple[int, int]:
    state = (state + 0x9E3779B97F4A7C15) & MASK64
    z = state
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return state, z ^ (z >> 31)


def check_range(start: int, end: int) -> int:
    """Validate a half-open range and return its width."""
    for bound in (start, end):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidRangeError(start, end, "bounds must be integers")
    difference = end - start
    if difference <= 0:
        raise InvalidRangeError(start, end)
    if difference > MAX_RANGE_WIDTH:
        raise InvalidRangeError(start, end, "width must not exceed 2**31")
    return difference


@dataclass
class Xorshift128Plus:
    """Two-word xorshift128+ state.

    ``state0 == 0`` is the unseeded sentinel: the next draw seeds both words
    from the clock. Instances are not locked; share them across threads only
    behind your own lock.
    """

    state0: int = 0
    state1: int = 0

    def __post_init__(self) -> None:
        self.state0 &= MASK64
        self.state1 &= MASK64

    @classmethod
    def from_seed(cls, value: int) -> "Xorshift128Plus":
        """Deterministic generator; equal seeds give equal streams."""
        words = []
        state = value & MASK64
        while len(words) < 2:
            state, word = _splitmix64(state)
            if word:
                words.append(word)
        return cls(words[0], words[1])

    @classmethod
    def from_time(cls) -> "Xorshift128Plus":
        gen = cls()
        gen.reseed_from_time()
        return gen

    def reseed_from_time(self) -> None:
        self.state0 = time_seed()
        self.state1 = time_seed()

    def next_u64(self) -> int:
        if self.state0 == 0:
            self.reseed_from_time()

        # s1 reads state0 and s0 reads state1, as in the xorshift128+ reference
        s1 = self.state0
        s0 = self.state1
        self.state0 = s0

        s1 ^= (s1 << 23) & MASK64
        s1 ^= s1 >> 17
        s1 ^= s0
        s1 ^= s0 >> 26

        self.state1 = s1
        return (s0 + s1) & MASK64

    def random(self) -> float:
        """Float in [0, 1) built from the top 53 bits of one draw."""
        return (self.next_u64() >> 11) / float(1 << 53)

    def randrange(self, start: int, end: int) -> int:
        """Integer in [start, end).

        Uses modulo reduction of a 32-bit draw, so widths that are not a
        power of two slightly favour lower values. Good enough for games.
        The draw is read as a signed 32-bit value; its absolute value is
        taken with Python ints, so -2**31 maps to 2**31 instead of
        overflowing.
        """
        difference = check_range(start, end)
        word = self.next_u64() & MASK32
        if word > 0x7FFFFFFF:
            word -= 1 << 32
        return start + abs(word) % difference


_shared = Xorshift128Plus()
_shared_lock = threading.Lock()


def seed(value: int | None = None) -> None:
    """Reseed the shared generator; ``None`` goes back to the clock."""
    fresh = Xorshift128Plus.from_time() if value is None else Xorshift128Plus.from_seed(value)
    with _shared_lock:
        _shared.state0 = fresh.state0
        _shared.state1 = fresh.state1


def random_float() -> float:
    """Returns a float in [0, 1), like JavaScript's ``Math.random``."""
    with _shared_lock:
        return _shared.random()


def random_int_range(start: int, end: int) -> int:
    """Returns an integer in [start, end) from the shared generator.

    Raises ``InvalidRangeError`` when ``end <= start``.
    """
    with _shared_lock:
        return _shared.randrange(start, end)
