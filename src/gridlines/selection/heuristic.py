"""
One-ply open-win heuristic for computer players.

Decision order:
    1. Misfire  - with probability misfire_percent, any open square
    2. Offense  - a square that completes one of our lines
    3. Defense  - a square that completes an opponent's line
    4. Fallback - any open square

Only the immediate completion or block is considered; forks (moves that
open two wins at once) are not detected.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TYPE_CHECKING

from gridlines.core.errors import NoOpenSquares
from gridlines.core.types import Square
from gridlines.grid.analysis import open_wins

if TYPE_CHECKING:
    from gridlines.grid.board import BoardState, BoardView
    from gridlines.players.player import Player

logger = logging.getLogger(__name__)

DEFAULT_MISFIRE_PERCENT = 20


class Reason(Enum):
    MISFIRE = "misfire"
    OFFENSE = "offense"
    DEFENSE = "defense"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class MoveDecision:
    """The chosen square and which rule picked it."""
    square: Square
    reason: Reason


class MoveSelector:
    """
    Computer move policy.

    Randomness comes only from the injected rng, so a seeded
    random.Random gives a reproducible sequence of decisions.
    """

    def __init__(self, misfire_percent: float = DEFAULT_MISFIRE_PERCENT,
                 rng: Optional[random.Random] = None):
        if not 0 <= misfire_percent <= 100:
            raise ValueError(f"misfire_percent must be in 0-100, got {misfire_percent}")
        self.misfire_percent = misfire_percent
        self.rng = rng if rng is not None else random.Random()

    def select(self, board: "BoardState | BoardView", player: "Player") -> Square:
        """Square for player to take next."""
        return self.decide(board, player).square

    def decide(self, board: "BoardState | BoardView", player: "Player") -> MoveDecision:
        """
        Pick a square and report which rule chose it.

        Raises:
            NoOpenSquares: board has no open square
        """
        open_squares = board.open_squares()
        if not open_squares:
            raise NoOpenSquares(f"No open squares left for {player.name}")

        if self.rng.random() * 100 < self.misfire_percent:
            return self._decision(self._pick(open_squares), Reason.MISFIRE, player)

        wins = open_wins(board)

        own = wins.get(player)
        if own:
            return self._decision(self._pick(own), Reason.OFFENSE, player)

        blocks = set()
        for owner, squares in wins.items():
            if owner is not player:
                blocks |= squares
        if blocks:
            return self._decision(self._pick(blocks), Reason.DEFENSE, player)

        return self._decision(self._pick(open_squares), Reason.FALLBACK, player)

    def _pick(self, squares: Iterable[Square]) -> Square:
        # Sorted so the draw depends only on the rng, not on set ordering.
        return self.rng.choice(sorted(squares))

    @staticmethod
    def _decision(square: Square, reason: Reason, player: "Player") -> MoveDecision:
        logger.debug("%s chose %s (%s)", player.name, square.key, reason.value)
        return MoveDecision(square, reason)
