"""
Tests for gridlines.match.controller

Tests the round / match state machine with scripted players.
"""

import random

import pytest

from gridlines.core.errors import MatchStateError, MoveAborted, MoveSelectionDefect
from gridlines.core.types import Square
from gridlines.grid.board import BoardView
from gridlines.match.controller import MatchController, MatchPhase, top_scorer
from gridlines.players.providers import ComputerMoveProvider
from gridlines.players.registry import PlayerRegistry
from gridlines.selection.heuristic import MoveSelector

# Alice takes the top row while Bob plays the middle row
ALICE_TOP_ROW = [(0, 0), (0, 1), (0, 2)]
BOB_MIDDLE = [(1, 0), (1, 1)]

# X O X / X O O / O X X, no line for anyone
DRAW_ALICE = [(0, 0), (0, 2), (1, 0), (2, 1), (2, 2)]
DRAW_BOB = [(0, 1), (1, 1), (1, 2), (2, 0)]


@pytest.fixture
def match(registry, alice, bob) -> MatchController:
    return MatchController(registry, board_size=3, score_target=3)


def script(player, squares):
    player.provider.squares.extend(squares)


class TestSetup:

    def test_initial_phase(self, match):
        assert match.phase is MatchPhase.AWAITING_ROUND
        assert match.round_number == 0
        assert match.match_winner() is None

    def test_needs_two_players(self, registry, alice):
        with pytest.raises(MatchStateError):
            MatchController(registry)

    def test_needs_providers(self, registry, alice):
        registry.register("Bob", "O")
        with pytest.raises(MatchStateError):
            MatchController(registry)

    def test_invalid_target(self, registry, alice, bob):
        with pytest.raises(ValueError):
            MatchController(registry, score_target=0)

    def test_scores_reset(self, registry, alice, bob):
        alice.score = 2
        MatchController(registry)
        assert alice.score == 0


class TestRound:

    def test_start_round(self, match, alice):
        match.start_round()
        assert match.phase is MatchPhase.ROUND_IN_PROGRESS
        assert match.round_number == 1
        assert match.current_player is alice
        assert len(match.board.open_squares()) == 9

    def test_turns_alternate(self, match, alice, bob):
        script(alice, [(0, 0)])
        script(bob, [(2, 2)])
        match.start_round()

        first = match.play_turn()
        assert first.player is alice
        assert match.current_player is bob

        second = match.play_turn()
        assert second.player is bob
        assert match.last_move is second

    def test_win_scores_one(self, match, alice, bob):
        script(alice, ALICE_TOP_ROW)
        script(bob, BOB_MIDDLE)

        assert match.play_round() is alice

        assert match.winner is alice
        assert match.is_terminal
        assert match.scores == {alice: 1, bob: 0}
        assert match.phase is MatchPhase.AWAITING_ROUND

    def test_draw_scores_nothing(self, match, alice, bob):
        script(alice, DRAW_ALICE)
        script(bob, DRAW_BOB)

        assert match.play_round() is None

        assert match.is_terminal
        assert match.winner is None
        assert match.scores == {alice: 0, bob: 0}

    def test_next_round_resets_board(self, match, alice, bob):
        script(alice, ALICE_TOP_ROW)
        script(bob, BOB_MIDDLE)
        match.play_round()

        match.start_round()

        assert match.round_number == 2
        assert match.last_move is None
        assert match.current_player is alice
        assert not match.is_terminal

    def test_three_players_cycle(self, registry, alice, bob, carol):
        match = MatchController(registry, board_size=4)
        script(alice, [(0, 0), (1, 0)])
        script(bob, [(0, 1)])
        script(carol, [(0, 2)])
        match.start_round()

        movers = [match.play_turn().player for _ in range(4)]

        assert movers == [alice, bob, carol, alice]


class TestPhaseGuards:

    def test_turn_before_round(self, match):
        with pytest.raises(MatchStateError):
            match.play_turn()

    def test_start_twice(self, match):
        match.start_round()
        with pytest.raises(MatchStateError):
            match.start_round()


class TestRejections:
    """Bad human squares are re-prompted, bad computer squares are defects."""

    def test_human_reprompted(self, registry, scripted):
        alice = registry.register("Alice", "X", scripted([(0, 0), (0, 0), (7, 7), (0, 1)], interactive=True))
        registry.register("Bob", "O", scripted([(1, 1)]))
        match = MatchController(registry)
        match.start_round()
        match.play_turn()
        match.play_turn()

        record = match.play_turn()

        assert record.square == Square(0, 1)
        rejected = [sq for sq, _ in alice.provider.rejected]
        assert rejected == [(0, 0), (7, 7)]

    def test_computer_defect(self, registry, scripted):
        registry.register("Alice", "X", scripted([(0, 0), (1, 1)]))
        registry.register("Bob", "O", scripted([(0, 0)]))
        match = MatchController(registry)
        match.start_round()
        match.play_turn()

        with pytest.raises(MoveSelectionDefect):
            match.play_turn()

    def test_abort_propagates(self, registry, scripted):
        class Quitter(scripted):
            def choose(self, board, player):
                raise MoveAborted("bye")

        registry.register("Alice", "X", Quitter(interactive=True))
        registry.register("Bob", "O", scripted())
        match = MatchController(registry)
        match.start_round()

        with pytest.raises(MoveAborted):
            match.play_turn()
        assert match.phase is MatchPhase.ROUND_IN_PROGRESS

    def test_provider_gets_read_only_view(self, registry, scripted):
        seen = []

        class Spy(scripted):
            def choose(self, board, player):
                seen.append(board)
                return super().choose(board, player)

        registry.register("Alice", "X", Spy([(0, 0)]))
        registry.register("Bob", "O", scripted())
        match = MatchController(registry)
        match.start_round()
        match.play_turn()

        assert isinstance(seen[0], BoardView)


class TestMatch:

    def test_three_wins_end_match(self, match, alice, bob):
        for _ in range(3):
            script(alice, ALICE_TOP_ROW)
            script(bob, BOB_MIDDLE)

        assert match.play_match() is alice

        assert match.phase is MatchPhase.MATCH_OVER
        assert match.round_number == 3
        assert alice.score == 3
        assert match.match_winner() is alice

    def test_no_rounds_after_match_over(self, registry, alice, bob):
        match = MatchController(registry, score_target=1)
        script(alice, ALICE_TOP_ROW)
        script(bob, BOB_MIDDLE)
        match.play_round()

        assert match.phase is MatchPhase.MATCH_OVER
        with pytest.raises(MatchStateError):
            match.start_round()

    def test_draws_do_not_end_match(self, registry, alice, bob):
        match = MatchController(registry, score_target=1)
        script(alice, DRAW_ALICE + ALICE_TOP_ROW)
        script(bob, DRAW_BOB + BOB_MIDDLE)

        assert match.play_match() is alice
        assert match.round_number == 2

    def test_tie_goes_to_first_registered(self, registry, alice, bob, carol):
        """Bob and Carol tie on score; Bob registered first."""
        bob.score = 1
        carol.score = 1
        assert top_scorer(registry.players) is bob

    def test_phase_is_read_only(self, match):
        with pytest.raises(AttributeError):
            match.phase = MatchPhase.MATCH_OVER
        assert match.match_winner() is None

    def test_computer_match_finishes(self):
        registry = PlayerRegistry()
        selector = MoveSelector(20, random.Random(11))
        registry.register("Hal", "X", ComputerMoveProvider(selector))
        registry.register("Deep Thought", "O", ComputerMoveProvider(selector))
        match = MatchController(registry, board_size=4, score_target=2)

        winner = match.play_match()

        assert winner.score == 2
        assert match.phase is MatchPhase.MATCH_OVER


class TestCallbacks:

    def test_on_move_and_round_end(self, registry, alice, bob):
        moves, rounds = [], []
        match = MatchController(
            registry,
            on_move=lambda m, record: moves.append(record.square),
            on_round_end=lambda m, winner: rounds.append((winner, m.phase)),
        )
        script(alice, ALICE_TOP_ROW)
        script(bob, BOB_MIDDLE)

        match.play_round()

        assert moves == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
        assert rounds == [(alice, MatchPhase.AWAITING_ROUND)]
