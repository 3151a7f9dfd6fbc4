"""
match.py - Match setup and round management for Connect Four

This module provides:
1. Setup of a match (player names, board size, number of rounds)
2. The per-round play loop with win/draw/abandon detection
3. The match loop with cross-round score reporting
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from connectfour.debug import debug
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_ROUNDS, CONNECT_N,
                               WIN_POINTS, DRAW_POINTS, END_COMMAND,
                               Mark, DropResult, RoundOutcome,
                               is_digits, digits_to_int, parse_board_size, parse_round_count)
from connectfour.game.board import Board
from connectfour.game.player import Player

FIRST_PLAYER_LABEL = "First"
SECOND_PLAYER_LABEL = "Second"


@dataclass
class MatchSettings:
    """Configuration resolved once before the first round."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    rounds: int = DEFAULT_ROUNDS


class ConnectFourMatch:
    """
    Hot-seat Connect Four match between two players.

    All answers come from an input provider (see connectfour.interfaces.cli)
    and all messages are written through the output callable, one line per
    call.
    """

    def __init__(self, input_provider, output: Callable[[str], None] = print):
        debug.debug("Initializing ConnectFourMatch", "match")
        self._input = input_provider
        self._output = output
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None
        self.board: Optional[Board] = None
        self.settings: Optional[MatchSettings] = None
        self._last_player: Optional[Player] = None

    def _say(self, message: str) -> None:
        self._output(message)

    # --- Setup ---

    def setup(self) -> MatchSettings:
        """Ask for player names, board size and round count."""
        self._say("Connect Four")
        self.player1 = Player(self._ask_name(FIRST_PLAYER_LABEL), Mark.PLAYER_ONE, self._input)
        self.player2 = Player(self._ask_name(SECOND_PLAYER_LABEL), Mark.PLAYER_TWO, self._input)

        rows, cols = self._ask_board_size()
        rounds = self._ask_round_count()
        self.settings = MatchSettings(rows=rows, cols=cols, rounds=rounds)
        self.board = Board(rows, cols)
        self._last_player = None

        debug.info(f"Match configured: {self.player1.name} vs {self.player2.name}, "
                   f"{rows}x{cols}, {rounds} round(s)", "match")
        return self.settings

    def _ask_name(self, label: str) -> str:
        while True:
            name = self._input.ask_player_name(label)
            if name:
                return name
            self._say("Invalid input")

    def _ask_board_size(self):
        while True:
            answer = self._input.ask_board_size()
            try:
                return parse_board_size(answer)
            except ValueError as e:
                debug.debug(f"Rejected board size {answer!r}: {e}", "match")
                self._say(str(e))

    def _ask_round_count(self) -> int:
        while True:
            answer = self._input.ask_number_of_games()
            try:
                return parse_round_count(answer)
            except ValueError as e:
                debug.debug(f"Rejected round count {answer!r}: {e}", "match")
                self._say(str(e))

    # --- Match loop ---

    def launch(self) -> List[RoundOutcome]:
        """
        Play every configured round, running setup first if needed.

        Returns:
            The outcome of each round, in order
        """
        if self.settings is None:
            self.setup()

        self._say(f"{self.player1.name} VS {self.player2.name}")
        self._say(f"{self.board.rows} X {self.board.cols} board")

        outcomes = []
        if self.settings.rounds > 1:
            self._say(f"Total {self.settings.rounds} games")
            for number in range(1, self.settings.rounds + 1):
                self._say(f"Game #{number}")
                outcomes.append(self.play_round())
                self._say("Score")
                self._say(self.score_line())
        else:
            self._say("Single Game")
            outcomes.append(self.play_round())

        self._say("Game over!")
        return outcomes

    def score_line(self) -> str:
        return (f"{self.player1.name}: {self.player1.score} "
                f"{self.player2.name}: {self.player2.score}")

    def first_player(self) -> Player:
        """The player who did not move last in the previous round starts."""
        return self._next_player(self._last_player)

    def _next_player(self, current: Optional[Player]) -> Player:
        return self.player2 if current is self.player1 else self.player1

    # --- Round loop ---

    def play_round(self) -> RoundOutcome:
        """Play one round on a freshly reset board."""
        self.board.reset()
        self._say(self.board.render())

        current = self.first_player()
        debug.info(f"Round starts, {current.name} moves first", "match")
        debug.start_timer("round")

        while True:
            self._last_player = current
            answer = current.request_move()

            if answer == END_COMMAND:
                outcome = RoundOutcome.ABANDONED
                break

            if not self._apply_move(answer, current):
                continue

            self._say(self.board.render())

            if self.board.is_full():
                self._say("It is a draw")
                self.player1.award_points(DRAW_POINTS)
                self.player2.award_points(DRAW_POINTS)
                outcome = RoundOutcome.DRAW
                break

            if self.board.longest_run_through(current.mark) >= CONNECT_N:
                self._say(f"Player {current.name} won")
                current.award_points(WIN_POINTS)
                outcome = RoundOutcome.WIN
                break

            current = self._next_player(current)

        debug.end_timer("round", "match")
        debug.info(f"Round ended: {outcome.name}", "match")
        return outcome

    def _apply_move(self, answer: str, player: Player) -> bool:
        """Validate an answer and drop the player's mark; report any rejection."""
        if not is_digits(answer):
            self._say("Incorrect column number")
            return False

        column = digits_to_int(answer, self.board.cols)
        result = self.board.drop(column, player.mark)
        if result == DropResult.OUT_OF_RANGE:
            self._say(f"The column number is out of range (1 - {self.board.cols})")
        elif result == DropResult.COLUMN_FULL:
            self._say(f"Column {column} is full")

        return result.accepted
