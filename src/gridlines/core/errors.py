"""
Exception hierarchy for the grid engine.

Input-class errors (bad size, occupied square, off-board square, name or
token collisions) are recoverable: the caller asks again with corrected
input. MoveSelectionDefect is not; it means the computer policy disagrees
with the board and must never be retried.
"""

from gridlines.core.types import MIN_BOARD_SIZE, MAX_BOARD_SIZE


class GridError(Exception):
    """Base class for all gridlines errors."""


class InvalidSize(GridError, ValueError):
    """Board size outside the supported range."""

    def __init__(self, size):
        self.size = size
        super().__init__(
            f"Board size must be an integer in {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}, got {size!r}"
        )


class OccupiedError(GridError, ValueError):
    """Write to a square that already has an occupant."""

    def __init__(self, square, occupant):
        self.square = square
        self.occupant = occupant
        super().__init__(f"Square {square} is already taken by {occupant.name}")


class OutOfRangeError(GridError, ValueError):
    """Square is not part of the board."""

    def __init__(self, square, size: int):
        self.square = square
        self.size = size
        super().__init__(f"Square {square!r} is not on a {size}x{size} board")


class InvalidOccupant(GridError, TypeError):
    """Only a player can occupy a square; None is the empty marker."""

    def __init__(self, occupant):
        self.occupant = occupant
        super().__init__(f"A square can only be taken by a player, got {occupant!r}")


class RegistrationError(GridError, ValueError):
    """Player could not be registered."""


class DuplicateRegistration(RegistrationError):
    """Name or token already used by a registered player."""


class InvalidRegistration(RegistrationError):
    """Empty name, or a token that is not a single glyph."""


class NoOpenSquares(GridError):
    """A move was requested on a board with no open squares."""


class MoveAborted(GridError):
    """The input collaborator gave up waiting for a move."""


class MatchStateError(GridError, RuntimeError):
    """Operation not allowed in the match's current phase."""


class MoveSelectionDefect(AssertionError):
    """A computer-chosen square was rejected by the board."""
