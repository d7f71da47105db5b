"""
Exceptions raised by the lessons package
"""


class LessonsError(Exception):
    """Base class for errors raised by this package"""


class InputReadError(LessonsError):
    """Input stream was exhausted or could not be read"""


class GameOverError(LessonsError):
    """A guess was submitted after the game was already won"""
