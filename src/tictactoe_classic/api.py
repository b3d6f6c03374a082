"""
Terminal play loop.

Usage:
    from tictactoe_classic.api import play_session

    final = play_session()          # reads from stdin, prints to stdout

This layer only reads snapshots and forwards cell choices; every rule lives
in TicTacToe.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe_classic.core.errors import InvalidIndex, MoveRejected
from tictactoe_classic.games.game_rules import empty_cells
from tictactoe_classic.games.game_state import GameState
from tictactoe_classic.games.tic_tac_toe import TicTacToe

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit")
RESTART_COMMANDS = ("r", "restart")


def _render(game: TicTacToe, write: Callable[[str], None], ascii_board: bool) -> None:
    snap = game.snapshot()
    write(game.state_string(ascii_only=ascii_board))
    write(snap.turn_message())
    message = snap.status_message()
    if message:
        write(message)
        write("Type 'r' to restart or 'q' to quit.")
    else:
        open_cells = ", ".join(str(i + 1) for i in empty_cells(snap.board))
        write(f"Open cells: {open_cells}")


def _human_turn(game: TicTacToe, raw: str, write: Callable[[str], None]) -> bool:
    """Parse one cell choice and apply it. Returns True if the board changed."""
    try:
        choice = int(raw)
    except ValueError:
        write(f"Invalid input: {raw!r}. Enter a cell number 1-9, 'r' or 'q'.")
        return False

    try:
        game.apply_move(choice - 1)
    except InvalidIndex:
        write(f"Illegal move: there is no cell {choice}. Enter a cell number 1-9.")
        return False
    except MoveRejected as e:
        write(f"Illegal move: cell {choice}: {e.reason.value}")
        return False
    return True


def play_session(
    game: Optional[TicTacToe] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    ascii_board: bool = False,
) -> GameState:
    """
    Run an interactive two-player session until the players quit.

    Parameters
    ----------
    game : TicTacToe, optional
        Game to drive. A fresh one is created if omitted.
    read : Callable[[str], str]
        Prompt-and-read function. End of input ends the session.
    write : Callable[[str], None]
        Line output function.
    ascii_board : bool
        Draw the grid with plain ASCII instead of box-drawing characters.

    Returns
    -------
    GameState
        Snapshot of the game when the session ended.
    """
    game = game if game is not None else TicTacToe()
    logger.debug("Session started")
    _render(game, write, ascii_board)

    while True:
        try:
            raw = read("Move: ").strip().lower()
        except EOFError:
            break

        if raw in QUIT_COMMANDS:
            break
        if raw in RESTART_COMMANDS:
            game.reset()
            write("")
            write("New game.")
            _render(game, write, ascii_board)
            continue
        if not raw:
            continue

        if _human_turn(game, raw, write):
            write("")
            _render(game, write, ascii_board)

    final = game.snapshot()
    logger.debug("Session ended: %r", final)
    return final


__all__ = ["play_session", "QUIT_COMMANDS", "RESTART_COMMANDS"]
