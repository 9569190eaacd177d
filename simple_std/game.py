"""Guess-the-number game, the classic first program for ``prompt``."""

from __future__ import annotations

from typing import Callable, Optional

from .console import prompt
from .errors import ConsoleError
from .prng import random_int_range


def play_guessing_game(
    secret: Optional[int] = None,
    *,
    low: int = 0,
    high: int = 100,
    read: Callable[[str], str] = prompt,
    write: Callable[[str], None] = print,
) -> int:
    """Play until the player guesses ``secret``; return the guess count.

    Unparseable lines are reported and not counted. Running out of input
    raises ``ConsoleError`` so the loop cannot spin forever.
    """

    if secret is None:
        secret = random_int_range(low, high)

    guesses = 0
    while True:
        line = read("Guess: ")
        if line == "":
            raise ConsoleError("input ended before the number was guessed")
        try:
            guess = int(line.strip())
        except ValueError:
            write("Not a number")
            continue

        guesses += 1
        if guess < secret:
            write("Too Small")
        elif guess > secret:
            write("Too Big")
        else:
            write("You win!")
            return guesses
