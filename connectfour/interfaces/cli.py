"""
cli.py - Command-line interface for playing Connect Four

This module defines the input provider contract used by the match, the
console implementation of it, and the argument parsing entry point.
"""

import argparse
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from connectfour import __version__
from connectfour.debug import debug, DebugLevel
from connectfour.game.match import ConnectFourMatch


class InputProvider(ABC):
    """Source of every answer a match needs from its players."""

    @abstractmethod
    def ask_player_name(self, label: str) -> str:
        """Ask for the name of the player labelled "First" or "Second"."""

    @abstractmethod
    def ask_board_size(self) -> str:
        """Ask for the board dimensions, e.g. "6 x 7"; blank means default."""

    @abstractmethod
    def ask_number_of_games(self) -> str:
        """Ask how many rounds to play; blank means one."""

    @abstractmethod
    def ask_move(self, player_name: str) -> str:
        """Ask a player for a column number or "end"."""


class ConsoleInput(InputProvider):
    """Input provider that prompts on stdout and reads lines from stdin."""

    def ask_player_name(self, label: str) -> str:
        print(f"{label} player's name:")
        return input()

    def ask_board_size(self) -> str:
        print("Set the board dimensions (Rows x Columns)")
        print("Press Enter for default (6 x 7)")
        return input()

    def ask_number_of_games(self) -> str:
        print("Do you want to play single or multiple games?")
        print("For a single game, input 1 or press Enter")
        print("Input a number of games:")
        return input()

    def ask_move(self, player_name: str) -> str:
        print(f"{player_name}'s turn:")
        return input()


class SimpleCLI:
    """Simple command-line interface for a console Connect Four match."""

    def __init__(self, input_provider: Optional[InputProvider] = None):
        self.input_provider = input_provider or ConsoleInput()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Two-player console Connect Four')
        parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (shortcut for --debug-level debug)')
        parser.add_argument('--debug-level', type=str, default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log records to this file')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run a match; returns the process exit status."""
        if not self.args:
            self.parse_args(argv)

        match = ConnectFourMatch(self.input_provider)
        try:
            match.launch()
        except (EOFError, KeyboardInterrupt):
            debug.warning("Input closed before the match finished", "cli")
            print("\nMatch interrupted.")
            return 1

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
