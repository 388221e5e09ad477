"""
Win Detector - Finds the line completed by the last move.

Only the lines through the last-played cell can have been completed by
that move, so at most four of the eight lines are checked.

Enumeration order is fixed: rows, columns, main diagonal, anti-diagonal.
When one move completes two lines at once, the first in that order wins.
"""

from __future__ import annotations

from .state import Board, BOARD_SIZE
from .errors import InvalidMoveError


ROWS = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS = ((0, 4, 8), (2, 4, 6))

# Every line is stored in ascending index order
LINES: tuple[tuple[int, int, int], ...] = ROWS + COLUMNS + DIAGONALS


def lines_through(cell_index: int) -> list[tuple[int, int, int]]:
    """Lines that contain a cell, in enumeration order."""
    return [line for line in LINES if cell_index in line]


def winning_line(board: Board, last_move: int) -> tuple[int, int, int] | None:
    """
    Return the line completed by the move at last_move, or None.

    The last-move cell must be occupied; an empty one never matches.
    """
    if not 0 <= last_move < BOARD_SIZE:
        raise InvalidMoveError(last_move, "cell index out of range")

    mark = board[last_move]
    if mark is None:
        return None

    for line in lines_through(last_move):
        if all(board[i] == mark for i in line):
            return line
    return None
