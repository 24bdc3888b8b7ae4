"""
gridlines - N x N tic-tac-toe engine with a one-ply computer opponent.

Quick Start:
    from gridlines import BoardState, PlayerRegistry, MoveSelector, open_wins

    registry = PlayerRegistry()
    alice = registry.register("Alice", "X")
    board = BoardState(4)
    board.write((0, 0), alice)
    open_wins(board)

Modules:
    core       - Square, MoveRecord, size bounds, error types
    grid       - Winning-line topology, board state, win / open-win scans
    selection  - Computer move policy (offense, defense, misfire)
    players    - Player, registry, move providers
    match      - Round and match state machine
    console    - Terminal prompts and rendering
"""

from gridlines.api import play_match, run

from gridlines.core import (
    Square,
    MoveRecord,
    GridError,
    InvalidSize,
    OccupiedError,
    OutOfRangeError,
    DuplicateRegistration,
    MoveAborted,
    MoveSelectionDefect,
)
from gridlines.grid import BoardState, BoardView, winning_lines, winner, is_terminal, open_wins
from gridlines.match import MatchController, MatchPhase
from gridlines.players import Player, PlayerRegistry, HumanMoveProvider, ComputerMoveProvider
from gridlines.selection import MoveSelector, select_move
from gridlines.utils.config import Config, DEFAULT_CONFIG

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_match",
    "run",
    "Config",
    "DEFAULT_CONFIG",
    # Engine
    "BoardState",
    "BoardView",
    "winning_lines",
    "winner",
    "is_terminal",
    "open_wins",
    "MoveSelector",
    "select_move",
    "MatchController",
    "MatchPhase",
    # Players
    "Player",
    "PlayerRegistry",
    "HumanMoveProvider",
    "ComputerMoveProvider",
    # Types
    "Square",
    "MoveRecord",
    # Errors
    "GridError",
    "InvalidSize",
    "OccupiedError",
    "OutOfRangeError",
    "DuplicateRegistration",
    "MoveAborted",
    "MoveSelectionDefect",
]
