"""
Number guessing game
"""

from .game import GuessingGame, draw_secret, parse_guess, compare

__all__ = [
    "GuessingGame",
    "draw_secret",
    "parse_guess",
    "compare"
]
