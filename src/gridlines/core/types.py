"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the grid engine:
- Square: (row, col) address of a single cell
- Line: fixed-length run of squares that wins when uniformly owned
- MoveRecord: one entry of a round's move log
- Board size bounds
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import NamedTuple, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from gridlines.players.player import Player


# ─── Board size bounds ────────────────────────────────────────────────────────

MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 5
BOARD_SIZES = tuple(range(MIN_BOARD_SIZE, MAX_BOARD_SIZE + 1))

# Row labels used for square keys ("a1", "b3", ...)
ROW_LABELS = string.ascii_lowercase[:MAX_BOARD_SIZE]


class Square(NamedTuple):
    """A single cell, addressed by 0-based row and column."""

    row: int
    col: int

    @property
    def key(self) -> str:
        """Stable display key: row letter + 1-based column number."""
        return f"{ROW_LABELS[self.row]}{self.col + 1}"

    def __str__(self) -> str:
        return self.key


# A winning line: exactly N distinct squares
Line = Tuple[Square, ...]


@dataclass(frozen=True)
class MoveRecord:
    """A single move: which square, and who took it."""
    square: Square
    player: "Player"
