"""
GameState - immutable game snapshot.

Readers (renderers, tests, the terminal loop) only ever see one of these.
The board is a read-only int8 copy, so nothing holding a snapshot can
reach back into the live game.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from tictactoe_classic.core.errors import InvalidIndex
from tictactoe_classic.core.types import CELL_STRINGS, NUM_CELLS, Cell, Status
from tictactoe_classic.games.game_rules import in_bounds


class GameState:
    """
    Lightweight snapshot of a game.

    Attributes:
        board:        read-only int8 array of 9 cells, row-major
        turn:         mark that plays next (frozen at the last mover once over)
        status:       IN_PROGRESS, WON or DRAW
        winner:       winning mark when status is WON, else None
        winning_line: the matched triple when status is WON, else None
    """
    __slots__ = ('board', 'turn', 'status', 'winner', 'winning_line')

    def __init__(
        self,
        board: np.ndarray,
        turn: Cell,
        status: Status = Status.IN_PROGRESS,
        winner: Optional[Cell] = None,
        winning_line: Optional[Tuple[int, int, int]] = None,
    ):
        frozen = np.array(np.ravel(board), dtype=np.int8)
        if frozen.size != NUM_CELLS:
            raise ValueError(f"Board must have {NUM_CELLS} cells, got {frozen.size}")
        frozen.flags.writeable = False
        turn = Cell(turn)
        if not turn.is_mark:
            raise ValueError("Turn must be X or O, not EMPTY")
        object.__setattr__(self, 'board', frozen)
        object.__setattr__(self, 'turn', turn)
        object.__setattr__(self, 'status', status)
        object.__setattr__(self, 'winner', winner)
        object.__setattr__(self, 'winning_line', winning_line)

    @classmethod
    def initial(cls) -> "GameState":
        """Empty board, X to move."""
        return cls(np.zeros(NUM_CELLS, dtype=np.int8), Cell.X)

    def __setattr__(self, name, value):
        raise AttributeError(f"GameState is immutable (tried to set {name!r})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.turn == other.turn
            and self.status == other.status
            and self.winner == other.winner
            and self.winning_line == other.winning_line
        )

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.turn, self.status, self.winner))

    def __repr__(self) -> str:
        cells = "".join(CELL_STRINGS[Cell(int(v))] if v else "." for v in self.board)
        return (
            f"GameState(board={cells!r}, turn={self.turn.name}, "
            f"status={self.status.name}, winner={self.winner.name if self.winner else None})"
        )

    def cell(self, index: int) -> Cell:
        if not in_bounds(index):
            raise InvalidIndex(index, self)
        return Cell(int(self.board[index]))

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def turn_message(self) -> str:
        if self.is_over:
            return "Game Over"
        return f"Turn: {CELL_STRINGS[self.turn]}"

    def status_message(self) -> str:
        if self.status is Status.WON:
            return f"Player {CELL_STRINGS[self.winner]} wins!"
        if self.status is Status.DRAW:
            return "It's a draw!"
        return ""
