"""
connectfour - Two-player console Connect Four

This package provides the board representation, the match and round loops,
and a console interface for playing hot-seat matches of one or more rounds.
"""

# Version number
__version__ = '0.1.0'
