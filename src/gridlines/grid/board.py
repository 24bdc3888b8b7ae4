"""
BoardState - mutable occupancy grid for one match.

Uses an object board:
    None   = empty
    Player = the player who took the square

`write()` is the only way a square gets an occupant and `reset()` the only
way it loses one. Everything outside the match controller works with a
BoardView, which exposes the read-only queries and nothing else.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from gridlines.core.errors import InvalidOccupant, OccupiedError, OutOfRangeError
from gridlines.core.types import Line, MoveRecord, Square
from gridlines.grid.rules import board_full
from gridlines.grid.topology import GridTopology, topology_for

if TYPE_CHECKING:
    from gridlines.players.player import Player

logger = logging.getLogger(__name__)


class BoardState:
    """Occupancy grid plus the move log of the current round."""

    __slots__ = ('topology', '_grid', '_moves')

    def __init__(self, size: int = 3):
        self.topology: GridTopology = topology_for(size)
        self._grid = np.full((self.topology.size, self.topology.size), None, dtype=object)
        self._moves: List[MoveRecord] = []

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Empty every square and clear the move log."""
        self._grid.fill(None)
        self._moves.clear()

    def write(self, square, player: "Player") -> MoveRecord:
        """
        Give square to player and log the move.

        Raises:
            OutOfRangeError: square is not on this board
            InvalidOccupant: player is None
            OccupiedError: square already has an occupant
        """
        square = self._checked(square)
        if player is None:
            raise InvalidOccupant(player)

        current = self._grid[square.row, square.col]
        if current is not None:
            raise OccupiedError(square, current)

        self._grid[square.row, square.col] = player
        record = MoveRecord(square, player)
        self._moves.append(record)
        logger.debug("%s took %s", player.name, square.key)
        return record

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.topology.size

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self.topology.lines

    @property
    def squares(self) -> Tuple[Square, ...]:
        return self.topology.squares

    @property
    def moves(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._moves)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._moves[-1] if self._moves else None

    def contains(self, square) -> bool:
        return square in self.topology

    def occupant(self, square) -> Optional["Player"]:
        """Player on square, or None if it is open."""
        square = self._checked(square)
        return self._grid[square.row, square.col]

    def line_occupants(self, line: Line) -> np.ndarray:
        """Occupants along a line, as a fresh object array."""
        rows = [sq.row for sq in line]
        cols = [sq.col for sq in line]
        return self._grid[rows, cols]

    def occupancy(self) -> np.ndarray:
        """Copy of the whole grid."""
        return self._grid.copy()

    def open_squares(self) -> List[Square]:
        """Empty squares in row-major order."""
        return [sq for sq in self.topology.squares if self._grid[sq.row, sq.col] is None]

    def is_full(self) -> bool:
        return board_full(self._grid)

    def view(self) -> "BoardView":
        return BoardView(self)

    def _checked(self, square) -> Square:
        if not self.contains(square):
            raise OutOfRangeError(square, self.size)
        row, col = square
        return Square(int(row), int(col))

    def __repr__(self) -> str:
        return f"BoardState(size={self.size}, moves={len(self._moves)})"


class BoardView:
    """Read-only window onto a BoardState."""

    __slots__ = ('_board',)

    def __init__(self, board: BoardState):
        self._board = board

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._board.lines

    @property
    def squares(self) -> Tuple[Square, ...]:
        return self._board.squares

    @property
    def moves(self) -> Tuple[MoveRecord, ...]:
        return self._board.moves

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._board.last_move

    def contains(self, square) -> bool:
        return self._board.contains(square)

    def occupant(self, square) -> Optional["Player"]:
        return self._board.occupant(square)

    def line_occupants(self, line: Line) -> np.ndarray:
        return self._board.line_occupants(line)

    def occupancy(self) -> np.ndarray:
        return self._board.occupancy()

    def open_squares(self) -> List[Square]:
        return self._board.open_squares()

    def is_full(self) -> bool:
        return self._board.is_full()

    def __repr__(self) -> str:
        return f"BoardView(size={self.size}, moves={len(self.moves)})"
