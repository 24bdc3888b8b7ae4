"""
Factory functions for creating selectors, players, and matches.
"""

import random
import string
from typing import Callable, Optional

from gridlines.match.controller import MatchController
from gridlines.players.player import Player
from gridlines.players.providers import ComputerMoveProvider
from gridlines.players.registry import PlayerRegistry
from gridlines.selection.heuristic import MoveSelector
from gridlines.utils.config import Config, COMPUTER_NAMES, DEFAULT_TOKENS

_SPARE_TOKENS = tuple("#@*+") + tuple(string.ascii_uppercase)


def create_rng(seed: Optional[int] = None) -> random.Random:
    """Dedicated random source; seeded runs are reproducible."""
    return random.Random(seed)


def create_selector(config: Config, rng: Optional[random.Random] = None) -> MoveSelector:
    """
    Create the computer move policy for a configuration.

    Args:
        config: Supplies misfire_percent and seed
        rng: Overrides the seeded generator built from config.seed
    """
    return MoveSelector(
        misfire_percent=config.misfire_percent,
        rng=rng if rng is not None else create_rng(config.seed),
    )


def free_token(registry: PlayerRegistry) -> str:
    """First default token nobody has taken."""
    for token in DEFAULT_TOKENS + _SPARE_TOKENS:
        if not registry.token_taken(token):
            return token
    raise ValueError("No free tokens left")


def add_computer_players(
    registry: PlayerRegistry,
    count: int,
    selector: MoveSelector,
) -> list[Player]:
    """
    Register count computer players sharing one selector.

    Names come from COMPUTER_NAMES, skipping any already taken.
    """
    added = []
    names = [n for n in COMPUTER_NAMES if not registry.name_taken(n)]
    for i in range(count):
        name = names[i] if i < len(names) else f"Computer {len(registry) + 1}"
        provider = ComputerMoveProvider(selector)
        added.append(registry.register(name, free_token(registry), provider))
    return added


def create_match(
    config: Config,
    registry: PlayerRegistry,
    on_move: Optional[Callable] = None,
    on_round_end: Optional[Callable] = None,
) -> MatchController:
    """
    Create a match for already registered players.

    Args:
        config: Supplies board_size and score_target
        registry: Players in turn order

    Returns:
        MatchController in the AWAITING_ROUND phase, scores reset
    """
    return MatchController(
        registry,
        board_size=config.board_size,
        score_target=config.score_target,
        on_move=on_move,
        on_round_end=on_round_end,
    )
