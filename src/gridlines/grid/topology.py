"""
GridTopology - the fixed set of winning lines for an N x N board.

Lines are produced in a fixed order:
    rows (top to bottom), columns (left to right),
    main diagonal, anti-diagonal

    3x3 example (flat indices):
        [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
        [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
        [0, 4, 8], [2, 4, 6],             # diagonals

The topology is a pure function of N, so it is computed once per size.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

import numpy as np

from gridlines.core.errors import InvalidSize
from gridlines.core.types import Line, Square, MIN_BOARD_SIZE, MAX_BOARD_SIZE
from gridlines.grid.rules import get_cols, get_diagonals, get_rows


def validate_size(size) -> int:
    """Return size as an int, or raise InvalidSize."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidSize(size)
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise InvalidSize(size)
    return int(size)


@dataclass(frozen=True)
class GridTopology:
    """Board size, its squares in row-major order, and its winning lines."""
    size: int
    squares: Tuple[Square, ...]
    lines: Tuple[Line, ...]

    def __contains__(self, square) -> bool:
        try:
            row, col = square
        except (TypeError, ValueError):
            return False
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            return False
        return 0 <= row < self.size and 0 <= col < self.size

    def lines_through(self, square: Square) -> Tuple[Line, ...]:
        """All winning lines containing square."""
        return tuple(line for line in self.lines if square in line)


def winning_lines(size: int) -> Tuple[Line, ...]:
    """
    Return the 2N + 2 winning lines of an N x N board.

    Raises:
        InvalidSize: if size is not an integer in 3-5
    """
    return _build_lines(validate_size(size))


def topology_for(size: int) -> GridTopology:
    """GridTopology for a board size; built once per size."""
    return _build_topology(validate_size(size))


@lru_cache(maxsize=None)
def _build_lines(n: int) -> Tuple[Line, ...]:
    index_grid = np.arange(n * n).reshape(n, n)

    lines = []
    for flat in get_rows(index_grid) + get_cols(index_grid) + get_diagonals(index_grid):
        lines.append(tuple(Square(int(i) // n, int(i) % n) for i in flat))
    return tuple(lines)


@lru_cache(maxsize=None)
def _build_topology(n: int) -> GridTopology:
    squares = tuple(Square(r, c) for r in range(n) for c in range(n))
    return GridTopology(size=n, squares=squares, lines=_build_lines(n))
