"""
Player - a match participant and its score.
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from gridlines.players.providers import MoveProvider


@dataclass(eq=False)
class Player:
    """
    A registered participant.

    Compared and hashed by identity: a Player on the board is a reference,
    never a value that could be mistaken for another player or for empty.
    """
    id: int
    name: str
    token: str
    provider: Optional["MoveProvider"] = field(default=None, repr=False)
    _score: int = field(default=0, repr=False)

    @property
    def score(self) -> int:
        """Rounds won in the current match."""
        return self._score

    @score.setter
    def score(self, value: int):
        """Sets the score; never negative."""
        if value < 0:
            raise ValueError(f"Score cannot be negative, got {value}")
        self._score = value

    @property
    def is_human(self) -> bool:
        """True if moves come from the input collaborator."""
        return self.provider is not None and self.provider.interactive

    def __str__(self) -> str:
        return f"{self.name} ({self.token})"
