"""
Data models for guesses, outcomes and swap slots
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Ordering(Enum):
    """Result of comparing a guess to the secret"""
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one pass through the guess loop"""
    line: str
    guess: Optional[int]
    ordering: Optional[Ordering]
    message: str

    @property
    def finished(self) -> bool:
        return self.ordering is Ordering.EQUAL


@dataclass
class Slot:
    """Mutable integer cell, shared by reference"""
    value: int
