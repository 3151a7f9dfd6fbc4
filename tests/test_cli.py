"""
Tests for the console interface and command-line entry point.
"""

import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.interfaces.cli import ConsoleInput, SimpleCLI, main


@pytest.fixture(autouse=True)
def restore_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, log_file="")


class TestConsoleInput:
    """Test the prompts printed by the console provider."""

    def test_ask_player_name(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda: "Anna")
        assert ConsoleInput().ask_player_name("First") == "Anna"
        assert capsys.readouterr().out == "First player's name:\n"

    def test_ask_board_size(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda: "")
        assert ConsoleInput().ask_board_size() == ""
        out = capsys.readouterr().out
        assert "Set the board dimensions (Rows x Columns)" in out
        assert "Press Enter for default (6 x 7)" in out

    def test_ask_number_of_games(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda: "2")
        assert ConsoleInput().ask_number_of_games() == "2"
        assert "Input a number of games:" in capsys.readouterr().out

    def test_ask_move(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda: "end")
        assert ConsoleInput().ask_move("Bob") == "end"
        assert capsys.readouterr().out == "Bob's turn:\n"


class TestSimpleCLI:
    """Test argument handling and a full run."""

    def test_full_match(self, scripted, capsys):
        provider = scripted(moves=["1", "2", "1", "2", "1", "2", "1"])
        status = SimpleCLI(provider).run([])

        out = capsys.readouterr().out
        assert status == 0
        assert out.startswith("Connect Four\n")
        assert "Player Anna won" in out
        assert out.rstrip().endswith("Game over!")

    def test_debug_flag(self, scripted):
        cli = SimpleCLI(scripted())
        cli.parse_args(["--debug"])
        assert debug.level == DebugLevel.DEBUG

    def test_debug_level(self, scripted):
        cli = SimpleCLI(scripted())
        cli.parse_args(["--debug-level", "trace"])
        assert debug.level == DebugLevel.TRACE

    def test_invalid_debug_level(self, scripted):
        with pytest.raises(SystemExit):
            SimpleCLI(scripted()).parse_args(["--debug-level", "loud"])

    def test_log_file(self, scripted, tmp_path, capsys):
        log_file = tmp_path / "match.log"
        provider = scripted(moves=["end"])
        SimpleCLI(provider).run(["--debug-level", "info", "--log-file", str(log_file)])
        debug.configure(log_file="")

        assert "Match configured: Anna vs Bob" in log_file.read_text()
        # Diagnostics stay off stdout
        assert "Match configured" not in capsys.readouterr().out

    def test_end_of_input(self, scripted, capsys):
        class ClosedInput(scripted):
            def ask_move(self, player_name):
                raise EOFError

        status = SimpleCLI(ClosedInput()).run([])
        assert status == 1
        assert "Match interrupted." in capsys.readouterr().out

    def test_main_uses_console(self, monkeypatch, capsys):
        answers = iter(["Anna", "Bob", "", "", "end"])
        monkeypatch.setattr("builtins.input", lambda: next(answers))
        assert main([]) == 0
        assert "Anna's turn:" in capsys.readouterr().out

    def test_oversized_move_is_not_fatal(self, scripted, capsys):
        provider = scripted(moves=["9" * 5000, "end"])
        assert SimpleCLI(provider).run([]) == 0
        assert "The column number is out of range (1 - 7)" in capsys.readouterr().out
