"""
TicTacToe game state machine.

Owns the live board and is the only thing that mutates it. Uses a flat int8
board:
    0 = empty
    1 = X (always moves first)
    2 = O

    IN_PROGRESS ──apply_move──▶ IN_PROGRESS (turn flips)
                              ├▶ WON(mark)
                              └▶ DRAW
    any state ──reset──▶ IN_PROGRESS (empty board, X to move)
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from tictactoe_classic.core.errors import InvalidIndex, MoveRejected
from tictactoe_classic.core.types import (
    BOARD_SIZE,
    CELL_STRINGS,
    NUM_CELLS,
    Cell,
    RejectReason,
    Status,
)
from tictactoe_classic.games.game_rules import board_full, find_winning_line, in_bounds
from tictactoe_classic.games.game_state import GameState

logger = logging.getLogger(__name__)

_BOX = ("╭───┬───┬───╮", "├───┼───┼───┤", "╰───┴───┴───╯", "│")
_ASCII = ("+---+---+---+", "+---+---+---+", "+---+---+---+", "|")


class TicTacToe:
    """Two-player 3x3 game: X and O alternate until a line or a full board."""

    __slots__ = ('board', 'turn', 'status', 'winner', 'winning_line')

    def __init__(self):
        self.board = np.zeros(NUM_CELLS, dtype=np.int8)
        self.turn = Cell.X
        self.status = Status.IN_PROGRESS
        self.winner: Optional[Cell] = None
        self.winning_line: Optional[Tuple[int, int, int]] = None

    def snapshot(self) -> GameState:
        """Immutable copy of the current state."""
        return GameState(self.board, self.turn, self.status, self.winner, self.winning_line)

    def is_over(self) -> bool:
        return self.status.is_terminal

    def apply_move(self, index: int) -> GameState:
        """
        Place the current turn's mark at ``index`` and settle the result.

        Args:
            index: Row-major cell index, 0-8.

        Returns:
            Snapshot after the move.

        Raises:
            InvalidIndex:  index is not an integer in [0, 8].
            MoveRejected:  game already over, or the cell is taken.
                           The game is left exactly as it was.
        """
        if not in_bounds(index):
            logger.debug("Rejected move %r: invalid index", index)
            raise InvalidIndex(index, self.snapshot())
        index = int(index)

        if self.is_over():
            logger.debug("Rejected move %d: game is over", index)
            raise MoveRejected(index, RejectReason.GAME_OVER, self.snapshot())

        if self.board[index] != Cell.EMPTY:
            logger.debug("Rejected move %d: cell holds %s", index, Cell(int(self.board[index])).name)
            raise MoveRejected(index, RejectReason.CELL_OCCUPIED, self.snapshot())

        mark = self.turn
        self.board[index] = mark
        logger.debug("%s plays cell %d", mark.name, index)

        result = find_winning_line(self.board)
        if result is not None:
            self.winner, self.winning_line = result
            self.status = Status.WON
            logger.info("%s wins on line %s", self.winner.name, self.winning_line)
        elif board_full(self.board):
            self.status = Status.DRAW
            logger.info("Game drawn")
        else:
            self.turn = mark.opposite()

        return self.snapshot()

    def reset(self) -> GameState:
        """Back to an empty board with X to move. Valid in any state."""
        self.board = np.zeros(NUM_CELLS, dtype=np.int8)
        self.turn = Cell.X
        self.status = Status.IN_PROGRESS
        self.winner = None
        self.winning_line = None
        logger.debug("Game reset")
        return self.snapshot()

    def state_string(self, ascii_only: bool = False) -> str:
        """
        Grid rendering of the board. Empty cells show their 1-based number
        so a player can tell which cell to pick.
        """
        top, mid, bottom, bar = _ASCII if ascii_only else _BOX
        lines = [top]
        for r in range(BOARD_SIZE):
            cells = []
            for c in range(BOARD_SIZE):
                i = r * BOARD_SIZE + c
                v = Cell(int(self.board[i]))
                cells.append(CELL_STRINGS[v] if v.is_mark else str(i + 1))
            lines.append(f"{bar} " + f" {bar} ".join(cells) + f" {bar}")
            if r < BOARD_SIZE - 1:
                lines.append(mid)
        lines.append(bottom)
        return "\n".join(lines)
