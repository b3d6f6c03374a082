"""
Property-based tests for the TicTacToe state machine.

Move sequences mix legal, occupied and out-of-range indices, so every
property is checked against rejected moves as well as accepted ones.
"""

from typing import List

import numpy as np
from hypothesis import given, strategies as st

from tictactoe_classic.core.errors import InvalidIndex, MoveRejected
from tictactoe_classic.core.types import Cell, RejectReason, Status
from tictactoe_classic.games.game_rules import board_full, matched_lines
from tictactoe_classic.games.game_state import GameState
from tictactoe_classic.games.tic_tac_toe import TicTacToe

move_sequences = st.lists(st.integers(min_value=-2, max_value=10), max_size=25)


def _try(game: TicTacToe, index: int) -> bool:
    """Apply a move, returning False if it was refused."""
    try:
        game.apply_move(index)
    except (InvalidIndex, MoveRejected):
        return False
    return True


@given(move_sequences)
def test_turn_alternation(moves: List[int]):
    """The Nth accepted move places X for odd N and O for even N."""
    game = TicTacToe()
    accepted = 0
    for index in moves:
        if _try(game, index):
            accepted += 1
            expected = Cell.X if accepted % 2 == 1 else Cell.O
            assert game.snapshot().cell(index) is expected


@given(move_sequences)
def test_placed_marks_never_change(moves: List[int]):
    game = TicTacToe()
    placed = {}
    for index in moves:
        _try(game, index)
        snap = game.snapshot()
        for i, mark in placed.items():
            assert snap.cell(i) is mark
        for i in range(9):
            if snap.cell(i) is not Cell.EMPTY:
                placed.setdefault(i, snap.cell(i))


@given(move_sequences)
def test_rejected_moves_change_nothing(moves: List[int]):
    game = TicTacToe()
    for index in moves:
        before = game.snapshot()
        if not _try(game, index):
            assert game.snapshot() == before


@given(move_sequences)
def test_at_most_one_line_matched(moves: List[int]):
    """Scanning all 8 triples never finds more than one match."""
    game = TicTacToe()
    for index in moves:
        _try(game, index)
        assert len(matched_lines(game.snapshot().board)) <= 1


@given(move_sequences)
def test_status_agrees_with_board(moves: List[int]):
    game = TicTacToe()
    for index in moves:
        _try(game, index)
        snap = game.snapshot()
        lines = matched_lines(snap.board)
        if lines:
            assert snap.status is Status.WON
            assert (snap.winner, snap.winning_line) == lines[0]
        elif board_full(snap.board):
            assert snap.status is Status.DRAW
        else:
            assert snap.status is Status.IN_PROGRESS


@given(move_sequences, st.integers(min_value=0, max_value=8))
def test_terminal_closure(moves: List[int], probe: int):
    game = TicTacToe()
    for index in moves:
        _try(game, index)
    if not game.is_over():
        return

    before = game.snapshot()
    try:
        game.apply_move(probe)
    except MoveRejected as e:
        assert e.reason is RejectReason.GAME_OVER
    else:
        raise AssertionError("move accepted after game over")
    assert game.snapshot() == before


@given(move_sequences, st.integers(min_value=1, max_value=4))
def test_reset_is_idempotent(moves: List[int], times: int):
    game = TicTacToe()
    for index in moves:
        _try(game, index)
    for _ in range(times):
        assert game.reset() == GameState.initial()
    assert np.all(game.snapshot().board == Cell.EMPTY)
