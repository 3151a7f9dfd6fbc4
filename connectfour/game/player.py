"""
player.py - Player identity and score for a Connect Four match
"""

from connectfour.debug import debug
from connectfour.utils import Mark


class Player:
    """A named participant holding a fixed mark and a cumulative score."""

    def __init__(self, name: str, mark: Mark, input_provider):
        if not name:
            raise ValueError("Player name must not be empty")
        if mark == Mark.EMPTY:
            raise ValueError("A player must be assigned a player mark")

        self.name = name
        self.mark = mark
        self.score = 0
        self._input = input_provider

    def request_move(self) -> str:
        """
        Ask the input provider for this player's next column.

        The raw answer is returned unchanged, including the "end" command;
        validating it is up to the caller.
        """
        answer = self._input.ask_move(self.name)
        debug.trace(f"{self.name} answered {answer!r}", "player")
        return answer

    def award_points(self, points: int):
        """Add points to the cumulative score."""
        if points < 0:
            raise ValueError(f"Cannot award negative points: {points}")
        self.score += points
        debug.debug(f"{self.name} awarded {points} point(s), score now {self.score}", "player")

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, mark={self.mark.name}, score={self.score})"
