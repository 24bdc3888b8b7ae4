"""
Core module - fundamental types, constants, and errors.

This module provides the building blocks used throughout the grid engine.
"""

from gridlines.core.types import (
    Square,
    Line,
    MoveRecord,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    BOARD_SIZES,
    ROW_LABELS,
)
from gridlines.core.errors import (
    GridError,
    InvalidSize,
    OccupiedError,
    OutOfRangeError,
    InvalidOccupant,
    RegistrationError,
    DuplicateRegistration,
    InvalidRegistration,
    NoOpenSquares,
    MoveAborted,
    MatchStateError,
    MoveSelectionDefect,
)

__all__ = [
    # Types
    "Square",
    "Line",
    "MoveRecord",
    # Constants
    "MIN_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "BOARD_SIZES",
    "ROW_LABELS",
    # Errors
    "GridError",
    "InvalidSize",
    "OccupiedError",
    "OutOfRangeError",
    "InvalidOccupant",
    "RegistrationError",
    "DuplicateRegistration",
    "InvalidRegistration",
    "NoOpenSquares",
    "MoveAborted",
    "MatchStateError",
    "MoveSelectionDefect",
]
