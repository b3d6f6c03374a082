"""
Core types and board constants.

Cells use the int8 board encoding throughout:
    0 = empty
    1 = X (moves first)
    2 = O
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto

import numpy as np


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Cell(IntEnum):
    """Contents of a single board cell."""

    EMPTY = 0
    X = 1
    O = 2

    @property
    def is_mark(self) -> bool:
        return self is not Cell.EMPTY

    def opposite(self) -> "Cell":
        """The other mark. Only defined for X and O."""
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Cell(3 - self.value)  # Toggle 1↔2


class Status(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not Status.IN_PROGRESS


class RejectReason(Enum):
    """Why a legal-index move was refused."""

    GAME_OVER = "game is over"
    CELL_OCCUPIED = "cell is occupied"


# Each cell value maps to its display string
CELL_STRINGS = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}

# Pre-computed winning lines (indices into the flat row-major board).
# Scan order matters: the first fully matched line decides the result.
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)
WIN_LINES.flags.writeable = False
