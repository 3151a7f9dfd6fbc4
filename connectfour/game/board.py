"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the grid of marks, applies
gravity drops, and measures runs through the most recently placed mark.
"""

import numpy as np
from typing import Optional, Tuple

from connectfour.debug import debug
from connectfour.utils import (DEFAULT_ROWS, DEFAULT_COLS, MIN_ROWS, MAX_ROWS,
                               MIN_COLS, MAX_COLS, DIRECTION_VECTORS,
                               Mark, DropResult, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    The dimensions are fixed at construction; the contents are cleared with
    reset() at the start of every round. Columns are 1-based at this interface
    and rows/columns are 0-based internally, row 0 being the top.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Initialize an empty board.

        Args:
            rows: Number of rows (5-9)
            cols: Number of columns (5-9)

        Raises:
            ValueError: if either dimension is outside its allowed range
        """
        if not MIN_ROWS <= rows <= MAX_ROWS:
            raise ValueError(f"rows must be between {MIN_ROWS} and {MAX_ROWS}, got {rows}")
        if not MIN_COLS <= cols <= MAX_COLS:
            raise ValueError(f"cols must be between {MIN_COLS} and {MAX_COLS}, got {cols}")

        debug.debug(f"Initializing new {rows}x{cols} Board", "board")
        self.rows = rows
        self.cols = cols
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        debug.debug("Resetting board", "board")
        self.grid = np.full((self.rows, self.cols), Mark.EMPTY.value, dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None

    def is_full(self) -> bool:
        """Check whether every cell holds a player's mark."""
        return not np.any(self.grid == Mark.EMPTY.value)

    def cell(self, row: int, col: int) -> Mark:
        """Get the mark at a 0-based (row, col) position."""
        return Mark(int(self.grid[row, col]))

    def drop(self, column: int, mark: Mark) -> DropResult:
        """
        Drop a mark into a column; it lands on the lowest empty cell.

        Args:
            column: The column to place the mark in (1-based)
            mark: The player's mark

        Returns:
            DropResult.OK if the mark was placed, otherwise the reason it was
            rejected; a rejected drop leaves the board unchanged
        """
        if mark == Mark.EMPTY:
            raise ValueError("Cannot drop an empty mark")

        if not 1 <= column <= self.cols:
            debug.debug(f"Invalid move: column {column} out of range", "board")
            return DropResult.OUT_OF_RANGE

        col = column - 1
        empty_rows = np.flatnonzero(self.grid[:, col] == Mark.EMPTY.value)
        if empty_rows.size == 0:
            debug.debug(f"Invalid move: column {column} is full", "board")
            return DropResult.COLUMN_FULL

        row = int(empty_rows[-1])
        debug.trace(f"Placing {mark.name} at position ({row}, {col})", "board")
        self.grid[row, col] = mark.value
        self.last_move = (row, col)
        return DropResult.OK

    def _is_on_board(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _count_towards(self, row: int, col: int, dr: int, dc: int, value: int) -> int:
        """Count contiguous cells holding value, starting one step from (row, col)."""
        count = 0
        r, c = row + dr, col + dc
        while self._is_on_board(r, c) and self.grid[r, c] == value:
            count += 1
            r += dr
            c += dc
        return count

    def longest_run_through(self, mark: Mark) -> int:
        """
        Measure the longest line of a mark passing through the last move.

        Only the four lines through the last placed cell are scanned, since a
        new line can only be completed by the piece just placed.

        Args:
            mark: The mark to count

        Returns:
            Length of the longest run, or 0 if no move has been played yet
        """
        if self.last_move is None:
            return 0

        row, col = self.last_move
        if self.grid[row, col] != mark.value:
            return 0

        longest = 0
        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            run = (1 + self._count_towards(row, col, dr, dc, mark.value)
                   + self._count_towards(row, col, -dr, -dc, mark.value))
            debug.trace(f"{direction.name} run for {mark.name}: {run}", "board")
            longest = max(longest, run)

        return longest

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of Mark values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
