"""
MatchController - rounds and matches as a small state machine.

    AWAITING_ROUND ──start_round()──▶ ROUND_IN_PROGRESS
          ▲                                 │ play_turn() until terminal
          │                                 ▼
          └────── no score ≥ target ─── ROUND_OVER ── score ≥ target ──▶ MATCH_OVER

The controller owns the BoardState. Providers, renderers and callbacks
only ever see a BoardView.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from gridlines.core.errors import (
    MatchStateError,
    MoveSelectionDefect,
    OccupiedError,
    OutOfRangeError,
)
from gridlines.core.types import MoveRecord
from gridlines.grid.analysis import is_terminal, winner
from gridlines.grid.board import BoardState, BoardView
from gridlines.players.player import Player
from gridlines.players.registry import PlayerRegistry

logger = logging.getLogger(__name__)

DEFAULT_SCORE_TARGET = 3
MIN_PLAYERS = 2


class MatchPhase(Enum):
    AWAITING_ROUND = auto()
    ROUND_IN_PROGRESS = auto()
    ROUND_OVER = auto()
    MATCH_OVER = auto()


def top_scorer(players: List[Player]) -> Player:
    """Highest score; the earliest in players wins a tie."""
    return max(players, key=lambda p: p.score)


MoveCallback = Callable[["MatchController", MoveRecord], None]
RoundEndCallback = Callable[["MatchController", Optional[Player]], None]


class MatchController:
    """
    Plays rounds on one board until a player reaches score_target.

    Args:
        registry: Players in turn order (at least two)
        board_size: N for the N x N board
        score_target: Rounds needed to win the match
        on_move: Called after every successful write
        on_round_end: Called once per round with its winner (None on a draw),
            after the phase has moved on
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        board_size: int = 3,
        score_target: int = DEFAULT_SCORE_TARGET,
        on_move: Optional[MoveCallback] = None,
        on_round_end: Optional[RoundEndCallback] = None,
    ):
        if len(registry) < MIN_PLAYERS:
            raise MatchStateError(f"A match needs at least {MIN_PLAYERS} players, got {len(registry)}")
        if score_target < 1:
            raise ValueError(f"score_target must be at least 1, got {score_target}")
        for p in registry:
            if p.provider is None:
                raise MatchStateError(f"Player {p.name} has no move provider")

        self._board = BoardState(board_size)
        self._registry = registry
        self._players: List[Player] = registry.players
        self.score_target = score_target
        self.on_move = on_move
        self.on_round_end = on_round_end

        self._phase = MatchPhase.AWAITING_ROUND
        self.round_number = 0
        self.round_winner: Optional[Player] = None
        self._turn = 0

        registry.reset_scores()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def start_round(self) -> None:
        """AWAITING_ROUND → ROUND_IN_PROGRESS on a fresh board."""
        self._require(MatchPhase.AWAITING_ROUND)
        self._board.reset()
        self._turn = 0
        self.round_winner = None
        self.round_number += 1
        self._phase = MatchPhase.ROUND_IN_PROGRESS
        logger.debug("Round %d started", self.round_number)

    def play_turn(self) -> MoveRecord:
        """
        Get a square from the current player and write it.

        Squares refused by the board go back to interactive providers until
        they supply a good one. A refused computer square is a defect.
        """
        self._require(MatchPhase.ROUND_IN_PROGRESS)
        player = self.current_player
        provider = player.provider
        view = self._board.view()

        while True:
            square = provider.choose(view, player)
            try:
                record = self._board.write(square, player)
                break
            except (OccupiedError, OutOfRangeError) as e:
                if not provider.interactive:
                    raise MoveSelectionDefect(
                        f"Computer move {square!r} for {player.name} was refused: {e}"
                    ) from e
                logger.debug("Rejected %r from %s: %s", square, player.name, e)
                provider.reject(square, e)

        if self.on_move is not None:
            self.on_move(self, record)

        if is_terminal(self._board):
            self._finish_round()
        else:
            self._turn = (self._turn + 1) % len(self._players)

        return record

    def play_round(self) -> Optional[Player]:
        """Play one whole round; returns its winner, or None on a draw."""
        self.start_round()
        while self.phase == MatchPhase.ROUND_IN_PROGRESS:
            self.play_turn()
        return self.round_winner

    def play_match(self) -> Player:
        """Play rounds until someone reaches the target; returns the match winner."""
        while self.phase != MatchPhase.MATCH_OVER:
            self.play_round()
        return self.match_winner()

    def _finish_round(self) -> None:
        self._phase = MatchPhase.ROUND_OVER

        self.round_winner = winner(self._board)
        if self.round_winner is not None:
            self.round_winner.score += 1
            logger.info("Round %d won by %s", self.round_number, self.round_winner.name)
        else:
            logger.info("Round %d drawn", self.round_number)

        if any(p.score >= self.score_target for p in self._players):
            self._phase = MatchPhase.MATCH_OVER
            logger.info("Match won by %s", self.match_winner().name)
        else:
            self._phase = MatchPhase.AWAITING_ROUND

        if self.on_round_end is not None:
            self.on_round_end(self, self.round_winner)

    def _require(self, phase: MatchPhase) -> None:
        if self.phase != phase:
            raise MatchStateError(f"Expected phase {phase.name}, match is in {self.phase.name}")

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------

    @property
    def phase(self) -> MatchPhase:
        return self._phase

    @property
    def board(self) -> BoardView:
        return self._board.view()

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def current_player(self) -> Player:
        return self._players[self._turn]

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._board.last_move

    @property
    def winner(self) -> Optional[Player]:
        """Owner of a completed line on the current board, if any."""
        return winner(self._board)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._board)

    @property
    def scores(self) -> Dict[Player, int]:
        """Scores in registration order."""
        return {p: p.score for p in self._players}

    def match_winner(self) -> Optional[Player]:
        """
        Highest scorer once the match is over, else None.
        Ties go to the earliest registered player.
        """
        if self._phase != MatchPhase.MATCH_OVER:
            return None
        return top_scorer(self._players)
