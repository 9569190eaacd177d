"""Public package surface for simple_std: console input and casual randomness."""

from .console import input, prompt
from .errors import ConsoleError, InvalidRangeError, SimpleStdError
from .game import play_guessing_game
from .prng import Xorshift128Plus, random_float, random_int_range, seed
from .sampler import DrawConfig, run_draws

__all__ = [
    "ConsoleError",
    "DrawConfig",
    "InvalidRangeError",
    "SimpleStdError",
    "Xorshift128Plus",
    "input",
    "play_guessing_game",
    "prompt",
    "random_float",
    "random_int_range",
    "run_draws",
    "seed",
]
