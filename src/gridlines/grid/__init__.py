"""
Grid module - topology, board state, and line analysis.
"""

from gridlines.grid.rules import all_equal, board_full, get_rows, get_cols, get_diagonals
from gridlines.grid.topology import GridTopology, winning_lines, topology_for, validate_size
from gridlines.grid.board import BoardState, BoardView
from gridlines.grid.analysis import winner, is_terminal, open_wins

__all__ = [
    "GridTopology",
    "BoardState",
    "BoardView",
    "winning_lines",
    "topology_for",
    "validate_size",
    "winner",
    "is_terminal",
    "open_wins",
    "all_equal",
    "board_full",
    "get_rows",
    "get_cols",
    "get_diagonals",
]
