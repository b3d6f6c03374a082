"""
Core module - cell/status types, board constants and move errors.
"""

from tictactoe_classic.core.types import (
    Cell,
    Status,
    RejectReason,
    BOARD_SIZE,
    NUM_CELLS,
    CELL_STRINGS,
    WIN_LINES,
)
from tictactoe_classic.core.errors import MoveError, InvalidIndex, MoveRejected

__all__ = [
    # Types
    "Cell",
    "Status",
    "RejectReason",
    # Constants
    "BOARD_SIZE",
    "NUM_CELLS",
    "CELL_STRINGS",
    "WIN_LINES",
    # Errors
    "MoveError",
    "InvalidIndex",
    "MoveRejected",
]
