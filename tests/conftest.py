"""
Shared test fixtures for tictactoe_classic tests.

Design principles:
- Fresh game per test
- Move sequences named by outcome
- Minimal, focused fixtures
"""

from typing import Callable, List

import pytest

from tictactoe_classic.games.game_state import GameState
from tictactoe_classic.games.tic_tac_toe import TicTacToe


# =============================================================================
# Move Sequence Fixtures
# =============================================================================

@pytest.fixture
def x_win_moves() -> List[int]:
    """X takes the top row on the 5th move."""
    return [0, 3, 1, 4, 2]


@pytest.fixture
def o_win_moves() -> List[int]:
    """O takes the bottom row on the 6th move."""
    return [0, 6, 1, 7, 4, 8]


@pytest.fixture
def draw_moves() -> List[int]:
    """Final board X O X / X X O / O X O, no line completed."""
    return [0, 1, 2, 5, 3, 6, 4, 8, 7]


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


@pytest.fixture
def play() -> Callable[[TicTacToe, List[int]], GameState]:
    """Apply a list of indices in order and return the last snapshot."""

    def _play(g: TicTacToe, moves: List[int]) -> GameState:
        snap = g.snapshot()
        for index in moves:
            snap = g.apply_move(index)
        return snap

    return _play


@pytest.fixture
def won_game(game: TicTacToe, play, x_win_moves) -> TicTacToe:
    """Game X has won on the top row."""
    play(game, x_win_moves)
    return game


@pytest.fixture
def drawn_game(game: TicTacToe, play, draw_moves) -> TicTacToe:
    """Game that ended in a draw."""
    play(game, draw_moves)
    return game
