"""
Selection module - computer move policy.

Provides the main entry point:
- select_move(): one decision with a throwaway selector
"""

from __future__ import annotations

import random
from typing import Optional, TYPE_CHECKING

from gridlines.core.types import Square
from gridlines.selection.heuristic import (
    MoveSelector,
    MoveDecision,
    Reason,
    DEFAULT_MISFIRE_PERCENT,
)

if TYPE_CHECKING:
    from gridlines.grid.board import BoardState, BoardView
    from gridlines.players.player import Player


def select_move(
    board: "BoardState | BoardView",
    player: "Player",
    misfire_percent: float = DEFAULT_MISFIRE_PERCENT,
    rng: Optional[random.Random] = None,
) -> Square:
    """
    Select a move for player.

    Args:
        board: Board to move on
        player: Acting player
        misfire_percent: Chance (0-100) of ignoring the heuristic
        rng: Random source; a fresh unseeded one if omitted

    Returns:
        An open square
    """
    return MoveSelector(misfire_percent, rng).select(board, player)


__all__ = [
    "select_move",
    "MoveSelector",
    "MoveDecision",
    "Reason",
    "DEFAULT_MISFIRE_PERCENT",
]
