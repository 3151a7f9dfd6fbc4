"""
utils.py - Utility functions and constants for the Connect Four console game

This module provides the match constants, the enumerations shared between the
board and the match loop, setup input parsing, and the ASCII board renderer.
"""

import re
from enum import Enum, auto
from typing import Tuple

import numpy as np

# Board constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
MIN_ROWS = 5
MAX_ROWS = 9
MIN_COLS = 5
MAX_COLS = 9
CONNECT_N = 4  # Number of pieces in a row to win

# Match constants
DEFAULT_ROUNDS = 1
MAX_ROUNDS = 9999
WIN_POINTS = 2
DRAW_POINTS = 1
END_COMMAND = "end"  # Abandons the current round

# Board glyphs
SIDE_BORDER = "║"
BOTTOM_BORDER = "═"
BOTTOM_JOINT = "╩"
BOTTOM_LEFT_CORNER = "╚"
BOTTOM_RIGHT_CORNER = "╝"

_BOARD_SIZE_RE = re.compile(r"\s*([0-9]+)\s*[xX]\s*([0-9]+)\s*")
_DIGITS_RE = re.compile(r"[0-9]+")


class Mark(Enum):
    """Enumeration of cell states, also used as a player's assigned mark."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __str__(self):
        return self.glyph


_GLYPHS = {
    Mark.EMPTY: " ",
    Mark.PLAYER_ONE: "o",
    Mark.PLAYER_TWO: "*",
}


class DropResult(Enum):
    """Outcome of dropping a mark into a column."""
    OK = auto()
    OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()

    @property
    def accepted(self) -> bool:
        return self == DropResult.OK


class RoundOutcome(Enum):
    """Enumeration representing how a round ended."""
    WIN = auto()
    DRAW = auto()
    ABANDONED = auto()


class Direction(Enum):
    """Enumeration representing the four axes scanned for a run."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def is_digits(text: str) -> bool:
    """Check that a string is a non-empty run of ASCII decimal digits."""
    return _DIGITS_RE.fullmatch(text) is not None


def digits_to_int(text: str, ceiling: int) -> int:
    """
    Convert a digit string, saturating at ceiling + 1.

    Strings with more significant digits than the ceiling never reach int().
    """
    significant = text.lstrip("0")
    if len(significant) > len(str(ceiling)):
        return ceiling + 1
    return min(int(significant or "0"), ceiling + 1)


def parse_board_size(text: str) -> Tuple[int, int]:
    """
    Parse a board size answer such as "6 x 7".

    A blank answer selects the default board. The separator is case-insensitive
    and whitespace is allowed around it and around both numbers.

    Args:
        text: Raw answer typed by the user

    Returns:
        (rows, cols) tuple

    Raises:
        ValueError: with the message to show the user when the answer is rejected
    """
    if not text.strip():
        return DEFAULT_ROWS, DEFAULT_COLS

    match = _BOARD_SIZE_RE.fullmatch(text)
    if match is None:
        raise ValueError("Invalid input")

    rows = digits_to_int(match.group(1), MAX_ROWS)
    cols = digits_to_int(match.group(2), MAX_COLS)
    if not MIN_ROWS <= rows <= MAX_ROWS:
        raise ValueError(f"Board rows should be from {MIN_ROWS} to {MAX_ROWS}")
    if not MIN_COLS <= cols <= MAX_COLS:
        raise ValueError(f"Board columns should be from {MIN_COLS} to {MAX_COLS}")

    return rows, cols


def parse_round_count(text: str) -> int:
    """
    Parse the number of rounds to play. A blank answer means a single round.

    Whitespace-only answers count as blank. At most MAX_ROUNDS rounds.

    Raises:
        ValueError: when the answer is not a decimal integer from 1 to MAX_ROUNDS
    """
    if not text.strip():
        return DEFAULT_ROUNDS

    if not is_digits(text):
        raise ValueError("Invalid input")

    rounds = digits_to_int(text, MAX_ROUNDS)
    if not 1 <= rounds <= MAX_ROUNDS:
        raise ValueError("Invalid input")

    return rounds


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid of mark values as ASCII art.

    Args:
        grid: 2D array of Mark values, row 0 at the top

    Returns:
        Column header, one bordered line per row, and the bottom border
    """
    rows, cols = grid.shape
    lines = [" " + " ".join(str(col) for col in range(1, cols + 1)) + " "]

    for row in range(rows):
        cells = [Mark(int(value)).glyph for value in grid[row]]
        lines.append(SIDE_BORDER + SIDE_BORDER.join(cells) + SIDE_BORDER)

    lines.append(BOTTOM_LEFT_CORNER + BOTTOM_JOINT.join(BOTTOM_BORDER * cols)
                 + BOTTOM_RIGHT_CORNER)

    return "\n".join(lines)
