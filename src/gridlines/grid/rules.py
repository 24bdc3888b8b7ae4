"""
NumPy utilities for square grids.

Line extraction works on any 2D array: an index grid (to build the topology)
or an occupancy grid (to read owners along a line). Extracted lines are
copies, never views, so callers cannot write through them.
"""

from __future__ import annotations

from typing import List

import numpy as np


def all_equal(line: np.ndarray) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is not None
    - all values are the first value

    Object arrays (player references) compare by identity.
    """
    if line.size == 0:
        return False

    first = line[0]
    if first is None:
        return False

    if line.dtype == np.object_:
        return all(x is first for x in line)
    return bool(np.all(line == first))


def empty_positions(line: np.ndarray) -> np.ndarray:
    """Indices of None entries in an object line."""
    return np.flatnonzero([x is None for x in line])


def get_rows(grid: np.ndarray) -> List[np.ndarray]:
    """Top to bottom. On the index grid each row becomes one winning line."""
    return [grid[r, :].copy() for r in range(grid.shape[0])]


def get_cols(grid: np.ndarray) -> List[np.ndarray]:
    """Left to right, each column as its own array."""
    return [grid[:, c].copy() for c in range(grid.shape[1])]


def get_diagonals(grid: np.ndarray) -> List[np.ndarray]:
    """
    [top-left to bottom-right, top-right to bottom-left]

    ndarray.diagonal() hands back a read-only view; the copies are writable.
    """
    n = grid.shape[0]
    return [grid.diagonal().copy(), grid[np.arange(n), n - 1 - np.arange(n)].copy()]


def board_full(grid: np.ndarray) -> bool:
    """True when no square of an occupancy grid holds the empty marker."""
    return not any(x is None for x in grid.flat)
