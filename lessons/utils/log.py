"""
Logging setup for the command-line programs
"""

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class LessonsHandler(logging.StreamHandler):
    """stderr handler installed by setup_logging"""


def setup_logging(level: str = "WARNING"):
    """
    Send log records to stderr at the given level.

    Calling this again only changes the level; the handler is added once.
    """
    root = logging.getLogger()
    if not any(isinstance(h, LessonsHandler) for h in root.handlers):
        handler = LessonsHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
