"""
Players module - participants, registration, and move sources.
"""

from gridlines.players.player import Player
from gridlines.players.registry import PlayerRegistry
from gridlines.players.providers import MoveProvider, HumanMoveProvider, ComputerMoveProvider

__all__ = [
    "Player",
    "PlayerRegistry",
    "MoveProvider",
    "HumanMoveProvider",
    "ComputerMoveProvider",
]
