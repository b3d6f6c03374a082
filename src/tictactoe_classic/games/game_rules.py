"""
NumPy rule helpers for the flat 3x3 board.

All functions are pure: they read a length-9 int8 board and never modify it.
"""

from __future__ import annotations

import numbers
from typing import List, Optional, Tuple

import numpy as np

from tictactoe_classic.core.errors import InvalidIndex
from tictactoe_classic.core.types import BOARD_SIZE, NUM_CELLS, WIN_LINES, Cell


def in_bounds(index) -> bool:
    """Return True if index is an integer cell index in [0, 8]."""
    if isinstance(index, (bool, np.bool_)):
        return False
    if not isinstance(index, numbers.Integral):
        return False
    return bool(0 <= index < NUM_CELLS)


def cell_index(row: int, col: int) -> int:
    """Row-major index for (row, col)."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise InvalidIndex((row, col))
    return row * BOARD_SIZE + col


def cell_coords(index: int) -> Tuple[int, int]:
    """(row, col) for a row-major index."""
    if not in_bounds(index):
        raise InvalidIndex(index)
    return divmod(int(index), BOARD_SIZE)


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == Cell.EMPTY)


def empty_cells(board: np.ndarray) -> List[int]:
    """Indices of empty cells, ascending."""
    return [int(i) for i in np.flatnonzero(board == Cell.EMPTY)]


def _line_owner(board: np.ndarray, line: np.ndarray) -> Cell:
    v = board[line[0]]
    if v != Cell.EMPTY and board[line[1]] == v and board[line[2]] == v:
        return Cell(int(v))
    return Cell.EMPTY


def find_winning_line(board: np.ndarray) -> Optional[Tuple[Cell, Tuple[int, int, int]]]:
    """
    First fully matched line in WIN_LINES order.

    Returns (mark, line) or None. Two lines can only complete on the same move
    on boards that alternating play never reaches, so the first match is taken
    as the result without looking further.
    """
    for line in WIN_LINES:
        owner = _line_owner(board, line)
        if owner is not Cell.EMPTY:
            return owner, tuple(int(i) for i in line)
    return None


def matched_lines(board: np.ndarray) -> List[Tuple[Cell, Tuple[int, int, int]]]:
    """Every fully matched line, in WIN_LINES order."""
    matches = []
    for line in WIN_LINES:
        owner = _line_owner(board, line)
        if owner is not Cell.EMPTY:
            matches.append((owner, tuple(int(i) for i in line)))
    return matches
