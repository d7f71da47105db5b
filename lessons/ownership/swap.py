"""
Two ways to swap a pair of integers.

swap_by_ref mutates the caller's slots in place. swap_by_val leaves its
arguments alone and hands back the reordered pair for the caller to rebind.
"""

import logging
import sys
from typing import Optional, TextIO, Tuple

from ..core.config import SWAP_HEADING, SWAP_INITIAL
from ..core.models import Slot

logger = logging.getLogger(__name__)


def swap_by_ref(a: Slot, b: Slot) -> None:
    """Exchange the contents of two slots through a temporary."""
    tmp = a.value
    a.value = b.value
    b.value = tmp


def swap_by_val(a: int, b: int) -> Tuple[int, int]:
    """Return the pair reordered."""
    a, b = b, a
    return a, b


def _show(a: int, b: int, stdout: TextIO):
    print(f"a = {a}, b = {b}", file=stdout)


def run_swap_demo(stdout: Optional[TextIO] = None,
                  a: int = SWAP_INITIAL[0],
                  b: int = SWAP_INITIAL[1]) -> Tuple[int, int]:
    """
    Print the pair before and after each swap form.

    Args:
        stdout: Stream to write to (default: sys.stdout)
        a: Initial first value
        b: Initial second value

    Returns:
        The pair after both swaps
    """
    stdout = stdout if stdout is not None else sys.stdout

    print(SWAP_HEADING, file=stdout)

    first, second = Slot(a), Slot(b)
    _show(first.value, second.value, stdout)

    swap_by_ref(first, second)
    logger.debug("After swap_by_ref: %s, %s", first, second)
    _show(first.value, second.value, stdout)

    a, b = swap_by_val(first.value, second.value)
    logger.debug("After swap_by_val: a=%d, b=%d", a, b)
    _show(a, b, stdout)

    return a, b
