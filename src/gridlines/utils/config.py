"""
Configuration and defaults.
"""

from gridlines.core.types import BOARD_SIZES, MIN_BOARD_SIZE, MAX_BOARD_SIZE
from gridlines.grid.topology import validate_size
from gridlines.match.controller import DEFAULT_SCORE_TARGET
from gridlines.selection.heuristic import DEFAULT_MISFIRE_PERCENT


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 3
DEFAULT_HUMAN_PLAYERS = 1
NUM_PLAYERS = 2

# Tokens handed out when a player does not pick one
DEFAULT_TOKENS = ("X", "O")
COMPUTER_NAMES = ("Hal", "Deep Thought")


class Config:
    """Match configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        score_target: int = DEFAULT_SCORE_TARGET,
        misfire_percent: float = DEFAULT_MISFIRE_PERCENT,
        seed: int | None = None,
        human_players: int = DEFAULT_HUMAN_PLAYERS,
    ):
        self.board_size = validate_size(board_size)

        if score_target < 1:
            raise ValueError(f"score_target must be at least 1, got {score_target}")
        self.score_target = score_target

        if not 0 <= misfire_percent <= 100:
            raise ValueError(f"misfire_percent must be in 0-100, got {misfire_percent}")
        self.misfire_percent = misfire_percent

        if not 0 <= human_players <= NUM_PLAYERS:
            raise ValueError(f"human_players must be in 0-{NUM_PLAYERS}, got {human_players}")
        self.human_players = human_players

        self.seed = seed

    @property
    def computer_players(self) -> int:
        return NUM_PLAYERS - self.human_players

    def __repr__(self) -> str:
        return (
            f"Config(board_size={self.board_size}, score_target={self.score_target}, "
            f"misfire_percent={self.misfire_percent}, seed={self.seed}, "
            f"human_players={self.human_players})"
        )


# Default configuration
DEFAULT_CONFIG = Config()

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "DEFAULT_BOARD_SIZE",
    "DEFAULT_HUMAN_PLAYERS",
    "DEFAULT_TOKENS",
    "COMPUTER_NAMES",
    "NUM_PLAYERS",
    "BOARD_SIZES",
    "MIN_BOARD_SIZE",
    "MAX_BOARD_SIZE",
]
