"""
Line scans over a board: completed lines and open wins.

Both scans accept a BoardState or a BoardView; they only read.
"""

from __future__ import annotations

from typing import Dict, Optional, Set, TYPE_CHECKING

from gridlines.core.types import Square
from gridlines.grid.rules import all_equal, empty_positions

if TYPE_CHECKING:
    from gridlines.grid.board import BoardState, BoardView
    from gridlines.players.player import Player


def winner(board: "BoardState | BoardView") -> Optional["Player"]:
    """
    Owner of the first fully and uniformly occupied line, in topology order.

    A legal board has at most one owner of completed lines; for contrived
    boards with several, the first line found wins.
    """
    for line in board.lines:
        occupants = board.line_occupants(line)
        if all_equal(occupants):
            return occupants[0]
    return None


def is_terminal(board: "BoardState | BoardView") -> bool:
    """True once someone has won or no square is left."""
    return winner(board) is not None or board.is_full()


def open_wins(board: "BoardState | BoardView") -> Dict["Player", Set[Square]]:
    """
    Map each player to the squares that would complete one of their lines.

    A line qualifies when exactly one of its squares is empty and every
    other square belongs to the same player. Returns {} on a terminal board.
    """
    if is_terminal(board):
        return {}

    candidates: Dict["Player", Set[Square]] = {}
    for line in board.lines:
        occupants = board.line_occupants(line)
        empty = empty_positions(occupants)
        if len(empty) != 1:
            continue

        gap = int(empty[0])
        owned = [occ for i, occ in enumerate(occupants) if i != gap]
        owner = owned[0]
        if all(occ is owner for occ in owned):
            candidates.setdefault(owner, set()).add(line[gap])

    return candidates
