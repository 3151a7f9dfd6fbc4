"""Shared fixtures for the Connect Four test suite."""

from collections import deque

import pytest

from connectfour.interfaces.cli import InputProvider


class ScriptedInput(InputProvider):
    """Input provider that replays canned answers and records what was asked."""

    def __init__(self, names=("Anna", "Bob"), board_sizes=("",), rounds=("",), moves=()):
        self.names = deque(names)
        self.board_sizes = deque(board_sizes)
        self.rounds = deque(rounds)
        self.moves = deque(moves)
        self.move_requests = []
        self.board_size_requests = 0
        self.round_requests = 0

    def ask_player_name(self, label):
        return self.names.popleft()

    def ask_board_size(self):
        self.board_size_requests += 1
        return self.board_sizes.popleft()

    def ask_number_of_games(self):
        self.round_requests += 1
        return self.rounds.popleft()

    def ask_move(self, player_name):
        self.move_requests.append(player_name)
        return self.moves.popleft()


class OutputLog(list):
    """Collects the lines a match writes."""

    def __call__(self, line):
        self.append(line)


@pytest.fixture
def output():
    return OutputLog()


@pytest.fixture
def scripted():
    return ScriptedInput
