"""
PlayerRegistry - ordered, collision-free set of players for one match.

Ids come from the registry's own counter, so two matches never share
id state. Registration order is turn order and the match tie-break.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, TYPE_CHECKING

from gridlines.core.errors import DuplicateRegistration, InvalidRegistration
from gridlines.players.player import Player

if TYPE_CHECKING:
    from gridlines.players.providers import MoveProvider

logger = logging.getLogger(__name__)


class PlayerRegistry:
    """Players in registration order."""

    def __init__(self, first_id: int = 1):
        self._next_id = first_id
        self._players: List[Player] = []

    def register(self, name: str, token: str, provider: Optional["MoveProvider"] = None) -> Player:
        """
        Create and add a player with the next free id.

        Raises:
            InvalidRegistration: empty name, or token is not one glyph
            DuplicateRegistration: name or token already registered
        """
        name, token = self._validate(name, token)
        player = Player(id=self._next_id, name=name, token=token, provider=provider)
        self._append(player)
        self._next_id += 1
        return player

    def add(self, player: Player) -> Player:
        """
        Add an already built player.

        The id must be unused; the counter moves past it so later
        registrations stay unique.
        """
        self._validate(player.name, player.token)
        if any(p.id == player.id for p in self._players):
            raise DuplicateRegistration(f"Player id {player.id} is already registered")
        self._append(player)
        self._next_id = max(self._next_id, player.id + 1)
        return player

    def name_taken(self, name: str) -> bool:
        wanted = name.strip().casefold()
        return any(p.name.casefold() == wanted for p in self._players)

    def token_taken(self, token: str) -> bool:
        return any(p.token == token for p in self._players)

    def by_id(self, player_id: int) -> Player:
        for p in self._players:
            if p.id == player_id:
                return p
        raise KeyError(player_id)

    def reset_scores(self) -> None:
        for p in self._players:
            p.score = 0

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    def _validate(self, name: str, token: str):
        name = (name or "").strip()
        if not name:
            raise InvalidRegistration("Player name cannot be empty")
        if not isinstance(token, str) or len(token) != 1 or token.isspace():
            raise InvalidRegistration(f"Token must be a single visible character, got {token!r}")
        if self.name_taken(name):
            raise DuplicateRegistration(f"Name {name!r} is already taken")
        if self.token_taken(token):
            raise DuplicateRegistration(f"Token {token!r} is already taken")
        return name, token

    def _append(self, player: Player) -> None:
        self._players.append(player)
        logger.debug("Registered player %d: %s", player.id, player)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))

    def __contains__(self, player) -> bool:
        return any(p is player for p in self._players)
