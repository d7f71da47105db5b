"""
Game constants and runtime settings
"""

import os

# Secret range (inclusive)
SECRET_MIN = 1
SECRET_MAX = 100

# Largest value a guess may take (unsigned 32-bit)
GUESS_MAX = 2**32 - 1

# User-facing text
MESSAGES = {
    "banner": "Guessing the number!",
    "prompt": "Please input your guess:",
    "retry": "Please input number next time!",
    "too_small": "Too small guess!",
    "too_big": "Too big guess!",
    "won": "You won!",
    "read_failed": "Failed to read user input."
}

# Swap demo
SWAP_HEADING = "Swapping two integers"
SWAP_INITIAL = (10, 8)

LOG_LEVEL_ENV = "LESSONS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> str:
    """Log level from the environment, WARNING when unset."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
