"""
MoveProvider - where a player's next square comes from.

The match controller only talks to this interface:
    HumanMoveProvider    - asks the input collaborator
    ComputerMoveProvider - asks a MoveSelector
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, TYPE_CHECKING

from gridlines.core.types import Square

if TYPE_CHECKING:
    from gridlines.core.errors import GridError
    from gridlines.grid.board import BoardView
    from gridlines.players.player import Player
    from gridlines.selection.heuristic import MoveSelector

PromptFn = Callable[["BoardView", "Player"], Square]
RejectFn = Callable[[Square, "GridError"], None]


class MoveProvider(ABC):
    """Source of moves for one player."""

    # Interactive providers get rejected squares handed back for another try.
    interactive: bool = False

    @abstractmethod
    def choose(self, board: "BoardView", player: "Player") -> Square:
        """
        Return the square player wants to take.

        May raise MoveAborted if no move is coming.
        """
        pass

    def reject(self, square, error: "GridError") -> None:
        """Called when the board refused the last square."""
        pass


class HumanMoveProvider(MoveProvider):
    """Delegates to an external prompt that returns parsed squares."""

    interactive = True

    def __init__(self, prompt: PromptFn, on_reject: Optional[RejectFn] = None):
        self._prompt = prompt
        self._on_reject = on_reject

    def choose(self, board: "BoardView", player: "Player") -> Square:
        return self._prompt(board, player)

    def reject(self, square, error: "GridError") -> None:
        if self._on_reject is not None:
            self._on_reject(square, error)


class ComputerMoveProvider(MoveProvider):
    """Delegates to the open-win heuristic."""

    def __init__(self, selector: "MoveSelector"):
        self.selector = selector

    def choose(self, board: "BoardView", player: "Player") -> Square:
        return self.selector.select(board, player)
