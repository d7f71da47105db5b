"""
Lessons: a number-guessing game and a swap-by-reference demo
"""

from .core.models import Ordering, GuessResult, Slot
from .core.errors import LessonsError, InputReadError, GameOverError
from .guessing.game import GuessingGame, draw_secret, parse_guess, compare
from .ownership.swap import swap_by_ref, swap_by_val, run_swap_demo

__version__ = "0.1.0"
__all__ = [
    "GuessingGame",
    "draw_secret",
    "parse_guess",
    "compare",
    "swap_by_ref",
    "swap_by_val",
    "run_swap_demo",
    "Ordering",
    "GuessResult",
    "Slot",
    "LessonsError",
    "InputReadError",
    "GameOverError"
]
