"""
Move errors.

None of these are fatal: the game is left untouched and the caller is
expected to ignore the move. Each error carries the unchanged snapshot so a
caller can re-render without asking the game again.
"""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from tictactoe_classic.core.types import NUM_CELLS, RejectReason

if TYPE_CHECKING:
    from tictactoe_classic.games.game_state import GameState


class MoveError(ValueError):
    """Base class for refused moves."""

    def __init__(self, message: str, snapshot: Optional["GameState"] = None):
        super().__init__(message)
        self.snapshot = snapshot


class InvalidIndex(MoveError):
    """Index is not an integer in [0, 8]."""

    def __init__(self, index: Any, snapshot: Optional["GameState"] = None):
        super().__init__(
            f"Invalid cell index {index!r}. Must be an integer 0-{NUM_CELLS - 1}.",
            snapshot,
        )
        self.index = index


class MoveRejected(MoveError):
    """Index was valid but the game rules refuse the move."""

    def __init__(
        self,
        index: int,
        reason: RejectReason,
        snapshot: Optional["GameState"] = None,
    ):
        super().__init__(f"Move at cell {index} rejected: {reason.value}", snapshot)
        self.index = index
        self.reason = reason
