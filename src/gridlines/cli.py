"""
Command-line interface for console play.
"""

import argparse
import logging

from gridlines.api import run
from gridlines.console import Console
from gridlines.core.errors import MoveAborted
from gridlines.utils.config import (
    Config,
    DEFAULT_BOARD_SIZE,
    DEFAULT_HUMAN_PLAYERS,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    NUM_PLAYERS,
)
from gridlines.match.controller import DEFAULT_SCORE_TARGET
from gridlines.selection.heuristic import DEFAULT_MISFIRE_PERCENT


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _percent(value: str) -> float:
    number = float(value)
    if not 0 <= number <= 100:
        raise argparse.ArgumentTypeError(f"must be in 0-100, got {number}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play N x N tic-tac-toe against a friend or the computer"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        choices=range(MIN_BOARD_SIZE, MAX_BOARD_SIZE + 1),
        default=None,
        help=f"Board size (default: ask, suggesting {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--target", "-t",
        type=_positive_int,
        default=DEFAULT_SCORE_TARGET,
        help=f"Rounds needed to win the match (default: {DEFAULT_SCORE_TARGET})",
    )
    parser.add_argument(
        "--misfire", "-m",
        type=_percent,
        default=DEFAULT_MISFIRE_PERCENT,
        help=f"Percent chance the computer ignores its heuristic (default: {DEFAULT_MISFIRE_PERCENT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices",
    )
    parser.add_argument(
        "--humans", "-H",
        type=int,
        choices=range(0, NUM_PLAYERS + 1),
        default=DEFAULT_HUMAN_PLAYERS,
        help=f"Number of human players (default: {DEFAULT_HUMAN_PLAYERS})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine decisions",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    size = args.size
    if size is None:
        try:
            size = console.prompt_board_size(DEFAULT_BOARD_SIZE)
        except (KeyboardInterrupt, MoveAborted):
            console.say("\nGoodbye.")
            return

    config = Config(
        board_size=size,
        score_target=args.target,
        misfire_percent=args.misfire,
        seed=args.seed,
        human_players=args.humans,
    )
    run(config, console)


if __name__ == "__main__":
    main()
