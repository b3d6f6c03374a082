"""
TicTacToe Classic - two-player 3x3 tic-tac-toe state machine.

Quick Start:
    from tictactoe_classic import TicTacToe, MoveError

    game = TicTacToe()
    game.apply_move(4)            # X takes the centre
    try:
        game.apply_move(4)        # O tries the same cell
    except MoveError as e:
        print(e)                  # state is unchanged
    print(game.snapshot().turn_message())

Modules:
    core   - Cell/Status types, board constants, move errors
    games  - TicTacToe state machine, GameState snapshots, rule helpers
    api    - Terminal play loop
    cli    - Command-line entry point
"""

from tictactoe_classic.core import (
    Cell,
    Status,
    RejectReason,
    MoveError,
    InvalidIndex,
    MoveRejected,
)
from tictactoe_classic.games import GameState, TicTacToe

__version__ = "1.0.0"

__all__ = [
    # Main API
    "TicTacToe",
    "GameState",
    # Types
    "Cell",
    "Status",
    "RejectReason",
    # Errors
    "MoveError",
    "InvalidIndex",
    "MoveRejected",
]
