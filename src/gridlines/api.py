"""
Public API for playing matches.

Usage:
    from gridlines import Config, play_match

    config = Config(board_size=4, score_target=3)
    winner = play_match(config)
"""

from __future__ import annotations

import logging
from typing import Optional

from gridlines.console import Console
from gridlines.core.errors import MoveAborted
from gridlines.match.controller import MatchController, MatchPhase
from gridlines.players.player import Player
from gridlines.players.providers import HumanMoveProvider
from gridlines.players.registry import PlayerRegistry
from gridlines.utils.config import Config
from gridlines.utils.factory import add_computer_players, create_match, create_selector

logger = logging.getLogger(__name__)


def register_players(config: Config, console: Console) -> PlayerRegistry:
    """Humans first (prompted), then computers."""
    registry = PlayerRegistry()
    for i in range(config.human_players):
        provider = HumanMoveProvider(console.prompt_square, on_reject=console.report_rejection)
        console.prompt_player(registry, i + 1, provider)
    add_computer_players(registry, config.computer_players, create_selector(config))
    return registry


def _run_match(controller: MatchController, console: Console) -> Player:
    while controller.phase != MatchPhase.MATCH_OVER:
        controller.start_round()
        console.show_round_start(controller)
        while controller.phase == MatchPhase.ROUND_IN_PROGRESS:
            controller.play_turn()
    winner = controller.match_winner()
    console.show_match_winner(winner)
    return winner


def play_match(
    config: Config,
    console: Optional[Console] = None,
    registry: Optional[PlayerRegistry] = None,
) -> Player:
    """
    Play one match to config.score_target.

    Parameters
    ----------
    config : Config
        Board size, score target, misfire rate, seed, and human count.
    console : Console, optional
        Terminal collaborator; a stdin/stdout one if omitted.
    registry : PlayerRegistry, optional
        Reuse players from an earlier match (scores are reset).

    Returns
    -------
    Player
        The match winner.
    """
    console = console or Console()
    if registry is None:
        registry = register_players(config, console)

    controller = create_match(
        config,
        registry,
        on_move=console.show_move,
        on_round_end=console.show_round_end,
    )
    return _run_match(controller, console)


def run(config: Config, console: Optional[Console] = None) -> None:
    """Play matches with the same players until they decline another."""
    console = console or Console()
    console.say(f"Welcome to {config.board_size}x{config.board_size} tic-tac-toe!")

    try:
        registry = register_players(config, console)
        while True:
            play_match(config, console, registry)
            if not console.prompt_play_again():
                break
        console.say("Thanks for playing. Goodbye!")
    except (KeyboardInterrupt, MoveAborted):
        console.say("\nInterrupted - goodbye.")
    except Exception:
        logger.exception("Fatal error in match loop")
        raise


__all__ = [
    "play_match",
    "register_players",
    "run",
]
