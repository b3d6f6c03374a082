"""
Games module - the tic-tac-toe state machine, its snapshot and rule helpers.
"""

from tictactoe_classic.games.game_state import GameState
from tictactoe_classic.games.game_rules import (
    in_bounds,
    cell_index,
    cell_coords,
    board_full,
    empty_cells,
    find_winning_line,
    matched_lines,
)
from tictactoe_classic.games.tic_tac_toe import TicTacToe

__all__ = [
    "GameState",
    "TicTacToe",
    "in_bounds",
    "cell_index",
    "cell_coords",
    "board_full",
    "empty_cells",
    "find_winning_line",
    "matched_lines",
]
