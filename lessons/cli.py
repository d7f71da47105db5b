#!/usr/bin/env python3
"""
Command-line entry points.

Usage:
    guessing-game
    guessing-game --seed 7 --verbose
    swap-demo
    lessons guess
    lessons swap
"""

import argparse
import logging
import random
import sys

from dotenv import load_dotenv

from .core.config import log_level
from .core.errors import InputReadError
from .guessing.game import GuessingGame
from .ownership.swap import run_swap_demo
from .utils.log import setup_logging

logger = logging.getLogger(__name__)


def run_guess(seed=None) -> int:
    """Play one game on stdin/stdout and return the exit code."""
    rng = random.Random(seed) if seed is not None else None
    game = GuessingGame(rng=rng)

    try:
        game.play(sys.stdin, sys.stdout)
    except InputReadError as e:
        logger.error("Guess loop aborted after %d turns: %s", game.turns, e)
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    return 0


def run_swap() -> int:
    run_swap_demo(sys.stdout)
    return 0


def _add_common(parser: argparse.ArgumentParser):
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug output on stderr")


def _add_guess(parser: argparse.ArgumentParser):
    parser.add_argument("--seed", type=int, help="Seed for the secret draw")
    _add_common(parser)


def _configure(args: argparse.Namespace):
    load_dotenv()
    setup_logging("DEBUG" if args.verbose else log_level())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lessons",
        description="Small programs for practicing the basics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Guess a number between 1 and 100
    lessons guess

    # Same secret every time
    lessons guess --seed 42

    # Swap two integers by reference and by value
    lessons swap
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    guess = subparsers.add_parser("guess", help="Play the number guessing game")
    _add_guess(guess)

    swap = subparsers.add_parser("swap", help="Run the swap demo")
    _add_common(swap)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure(args)

    if args.command == "guess":
        return run_guess(args.seed)
    return run_swap()


def guess_main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="guessing-game", description="Guess a number between 1 and 100")
    _add_guess(parser)
    args = parser.parse_args(argv)
    _configure(args)
    return run_guess(args.seed)


def swap_main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="swap-demo", description="Swap two integers by reference and by value")
    _add_common(parser)
    args = parser.parse_args(argv)
    _configure(args)
    return run_swap()


if __name__ == "__main__":
    sys.exit(main())
