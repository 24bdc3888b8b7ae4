"""
Console collaborator: text prompts and board rendering.

Everything that reads or prints text lives here. The engine hands this
module read-only views and receives parsed Squares, sizes, names and tokens.
Input and output functions are injectable so tests can script a session.
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

from gridlines.core.errors import GridError, InvalidSize, MoveAborted, RegistrationError
from gridlines.core.types import ROW_LABELS, MoveRecord, Square
from gridlines.grid.topology import validate_size

if TYPE_CHECKING:
    from gridlines.grid.board import BoardView
    from gridlines.match.controller import MatchController
    from gridlines.players.player import Player
    from gridlines.players.registry import PlayerRegistry

EMPTY_CELL = " "
YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


def parse_square(text: str, size: int) -> Square:
    """
    Parse a square name such as "b2" into Square(1, 1).

    Raises:
        ValueError: text is not a square on a size x size board
    """
    key = text.strip().lower()
    if len(key) < 2 or key[0] not in ROW_LABELS[:size] or not key[1:].isdigit():
        raise ValueError(f"'{text.strip()}' is not a square name like a1")

    col = int(key[1:]) - 1
    if not 0 <= col < size:
        raise ValueError(f"Column must be 1-{size}")
    return Square(ROW_LABELS.index(key[0]), col)


def render_board(board: "BoardView") -> str:
    """Box-drawn board with row letters and column numbers."""
    n = board.size
    grid = board.occupancy()

    def cell(r: int, c: int) -> str:
        occupant = grid[r, c]
        return EMPTY_CELL if occupant is None else occupant.token

    lines = ["    " + "   ".join(str(c + 1) for c in range(n))]
    lines.append("  ╭" + "┬".join("───" for _ in range(n)) + "╮")
    for r in range(n):
        lines.append(f"{ROW_LABELS[r]} │ " + " │ ".join(cell(r, c) for c in range(n)) + " │")
        if r < n - 1:
            lines.append("  ├" + "┼".join("───" for _ in range(n)) + "┤")
    lines.append("  ╰" + "┴".join("───" for _ in range(n)) + "╯")
    return "\n".join(lines)


def render_scores(controller: "MatchController") -> str:
    parts = [f"{p.name} ({p.token}): {score}" for p, score in controller.scores.items()]
    return "Score - " + ", ".join(parts) + f"  (first to {controller.score_target})"


class Console:
    """Prompts and reports for one terminal session."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output

    def say(self, message: str = "") -> None:
        self._output(message)

    def ask(self, prompt: str) -> str:
        """Read one line; end of input aborts."""
        try:
            return self._input(prompt)
        except EOFError as e:
            raise MoveAborted("Input closed") from e

    # -------------------------------------------------------------------------
    # Setup prompts
    # -------------------------------------------------------------------------

    def prompt_board_size(self, default: int) -> int:
        while True:
            raw = self.ask(f"Board size (3-5) [{default}]: ").strip()
            if not raw:
                return default
            try:
                return validate_size(int(raw))
            except (ValueError, InvalidSize):
                self.say("Please enter 3, 4 or 5.")

    def prompt_player(self, registry: "PlayerRegistry", ordinal: int, provider) -> "Player":
        """Ask for a name and token until the registry accepts them."""
        while True:
            name = self.ask(f"Player {ordinal}, what's your name? ").strip()
            if not name:
                self.say("Name cannot be empty.")
                continue
            if registry.name_taken(name):
                self.say(f"{name} is already playing, pick another name.")
                continue
            break

        while True:
            token = self.ask(f"{name}, pick a single-character marker: ").strip()
            try:
                return registry.register(name, token, provider)
            except RegistrationError as e:
                self.say(str(e))

    def prompt_square(self, board: "BoardView", player: "Player") -> Square:
        """Ask player for an open square."""
        open_keys = ", ".join(sq.key for sq in board.open_squares())
        while True:
            raw = self.ask(f"{player.name} ({player.token}), choose a square ({open_keys}): ")
            try:
                square = parse_square(raw, board.size)
            except ValueError as e:
                self.say(str(e))
                continue
            if board.occupant(square) is not None:
                self.say(f"{square.key} is taken.")
                continue
            return square

    def report_rejection(self, square, error: GridError) -> None:
        self.say(f"That square can't be used: {error}")

    def prompt_play_again(self) -> bool:
        while True:
            answer = self.ask("Play again? (y/n) ").strip().lower()
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.say("Please answer y or n.")

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def show_move(self, controller: "MatchController", record: MoveRecord) -> None:
        self.say()
        self.say(f"{record.player.name} took {record.square.key}")
        self.say(render_board(controller.board))

    def show_round_start(self, controller: "MatchController") -> None:
        self.say()
        self.say(f"Round {controller.round_number}")
        self.say(render_board(controller.board))

    def show_round_end(self, controller: "MatchController", winner: Optional["Player"]) -> None:
        self.say()
        self.say(f"{winner.name} wins the round!" if winner else "It's a tie!")
        self.say(render_scores(controller))

    def show_match_winner(self, winner: "Player") -> None:
        self.say()
        self.say("=" * 40)
        self.say(f"{winner.name} wins the match!")
        self.say("=" * 40)
