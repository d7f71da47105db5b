"""
Number guessing game.

A secret is drawn once from [SECRET_MIN, SECRET_MAX]. Each line read from
the input is parsed as an unsigned integer and compared to the secret
until they match.

Usage:
    game = GuessingGame()
    turns = game.play(sys.stdin, sys.stdout)
"""

import logging
import random
import re
import sys
from typing import Optional, TextIO

from ..core.config import SECRET_MIN, SECRET_MAX, GUESS_MAX, MESSAGES
from ..core.errors import InputReadError, GameOverError
from ..core.models import Ordering, GuessResult

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"\+?[0-9]+")

# Unicode White_Space; str.strip() would also drop \x1c-\x1f
_WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def draw_secret(rng: Optional[random.Random] = None) -> int:
    """Draw the secret uniformly from [SECRET_MIN, SECRET_MAX]."""
    source = rng if rng is not None else random
    return source.randint(SECRET_MIN, SECRET_MAX)


def parse_guess(text: str) -> Optional[int]:
    """
    Parse a line of input as an unsigned 32-bit integer.

    Surrounding whitespace is ignored and a single leading '+' is allowed.

    Returns:
        The parsed value, or None if the text is not a valid guess
    """
    text = text.strip(_WHITE_SPACE)
    if not _UNSIGNED.fullmatch(text):
        return None

    value = int(text)
    if value > GUESS_MAX:
        return None
    return value


def compare(guess: int, secret: int) -> Ordering:
    if guess < secret:
        return Ordering.LESS
    if guess > secret:
        return Ordering.GREATER
    return Ordering.EQUAL


_ORDERING_MESSAGES = {
    Ordering.LESS: MESSAGES["too_small"],
    Ordering.GREATER: MESSAGES["too_big"],
    Ordering.EQUAL: MESSAGES["won"]
}


class GuessingGame:
    """One game: a fixed secret and the guesses made against it"""

    def __init__(self, secret: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.secret = secret if secret is not None else draw_secret(rng)
        self.turns = 0
        self.finished = False
        logger.debug("Secret drawn: %d", self.secret)

    def step(self, line: str) -> GuessResult:
        """
        Handle one line of input.

        Args:
            line: Raw text as read from the input

        Returns:
            GuessResult for this line

        Raises:
            GameOverError: If the game was already won
        """
        if self.finished:
            raise GameOverError(f"Game already won in {self.turns} turns")

        guess = parse_guess(line)
        if guess is None:
            logger.debug("Ignoring non-numeric input: %r", line)
            return GuessResult(line, None, None, MESSAGES["retry"])

        self.turns += 1
        ordering = compare(guess, self.secret)
        logger.debug("Turn %d: %d is %s", self.turns, guess, ordering.value)

        if ordering is Ordering.EQUAL:
            self.finished = True

        return GuessResult(line, guess, ordering, _ORDERING_MESSAGES[ordering])

    def play(self, stdin: Optional[TextIO] = None,
             stdout: Optional[TextIO] = None) -> int:
        """
        Run the guess loop until the secret is found.

        Args:
            stdin: Stream to read guesses from (default: sys.stdin)
            stdout: Stream to write messages to (default: sys.stdout)

        Returns:
            Number of numeric guesses it took to win

        Raises:
            InputReadError: If the input ends or fails before the game is won
        """
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout

        print(MESSAGES["banner"], file=stdout)

        while True:
            print(MESSAGES["prompt"], file=stdout)
            stdout.flush()

            try:
                line = stdin.readline()
            except (OSError, UnicodeDecodeError) as e:
                raise InputReadError(MESSAGES["read_failed"]) from e

            # readline() returns "" only at end of stream
            if not line:
                raise InputReadError(MESSAGES["read_failed"])

            result = self.step(line)
            print(result.message, file=stdout)

            if result.finished:
                return self.turns
