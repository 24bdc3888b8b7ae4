"""
Match module - round and match orchestration.
"""

from gridlines.match.controller import MatchController, MatchPhase, DEFAULT_SCORE_TARGET, MIN_PLAYERS, top_scorer

__all__ = [
    "MatchController",
    "MatchPhase",
    "DEFAULT_SCORE_TARGET",
    "MIN_PLAYERS",
    "top_scorer",
]
