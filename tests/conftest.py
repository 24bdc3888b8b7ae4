"""
Shared test fixtures for gridlines tests.

Design principles:
- Players are real registry players, moves are scripted
- Boards are built through BoardState.write only
- Randomness is always a seeded random.Random
"""

import random
from typing import Iterable, List

import pytest

from gridlines.console import Console
from gridlines.core.types import Square
from gridlines.grid.board import BoardState
from gridlines.players.player import Player
from gridlines.players.providers import MoveProvider
from gridlines.players.registry import PlayerRegistry


# =============================================================================
# Providers
# =============================================================================

class ScriptedProvider(MoveProvider):
    """Plays a fixed list of squares, recording any rejections."""

    def __init__(self, squares: Iterable = (), interactive: bool = False):
        self.squares: List = list(squares)
        self.interactive = interactive
        self.rejected: List = []

    def choose(self, board, player) -> Square:
        return self.squares.pop(0)

    def reject(self, square, error) -> None:
        self.rejected.append((square, error))


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def registry() -> PlayerRegistry:
    return PlayerRegistry()


@pytest.fixture
def alice(registry: PlayerRegistry) -> Player:
    return registry.register("Alice", "X", ScriptedProvider())


@pytest.fixture
def bob(registry: PlayerRegistry, alice: Player) -> Player:
    return registry.register("Bob", "O", ScriptedProvider())


@pytest.fixture
def carol(registry: PlayerRegistry, bob: Player) -> Player:
    return registry.register("Carol", "#", ScriptedProvider())


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board3() -> BoardState:
    return BoardState(3)


@pytest.fixture(params=[3, 4, 5])
def any_size(request) -> int:
    return request.param


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fill():
    """
    Write a text layout onto a board, e.g. ["XX.", "O..", "..."].
    '.' leaves a square empty; other characters map through players.
    """
    def _fill(board: BoardState, layout: List[str], players: dict) -> BoardState:
        for r, row in enumerate(layout):
            for c, ch in enumerate(row):
                if ch != ".":
                    board.write((r, c), players[ch])
        return board
    return _fill


@pytest.fixture
def scripted():
    """The ScriptedProvider class, for tests that build their own players."""
    return ScriptedProvider


# =============================================================================
# Console Fixtures
# =============================================================================

@pytest.fixture
def scripted_console():
    """
    Build a Console fed from answers; returns (console, printed lines).
    Running out of answers behaves like a closed stdin.
    """
    def _make(answers):
        printed = []
        remaining = iter(answers)

        def input_fn(prompt):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return Console(input_fn, printed.append), printed
    return _make
