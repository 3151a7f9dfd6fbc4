"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the players, and the
match/round management.
"""

from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.match import ConnectFourMatch, MatchSettings

__all__ = ['Board', 'Player', 'ConnectFourMatch', 'MatchSettings']
