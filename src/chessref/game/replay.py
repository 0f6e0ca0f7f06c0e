"""Driver loop: feeds move records into the game and reports each step."""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessref.core.move import Move
from chessref.core.notation import render_board
from chessref.core.types import BOARD_SIZE, Square, is_valid_square
from chessref.game.moves_file import MoveRecord, MovesFileError, MoveSource
from chessref.game.state import GameState, MoveOutcome, apply_move

_LOGGER = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "No more moves available - GAME OVER"
FORMAT_ERROR_MESSAGE = "Error in moves file format"


def record_to_move(record: MoveRecord) -> Move | None:
    """Convert a raw record to a :class:`Move`; ``None`` if malformed.

    Record rows count from the top of the board, so row ``r`` is rank
    index ``7 - r``.
    """
    if len(record) != 4:
        return None
    from_file, from_row, to_file, to_row = record
    last = BOARD_SIZE - 1
    move = Move(Square(from_file, last - from_row), Square(to_file, last - to_row))
    if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
        return None
    return move


def describe_outcome(outcome: MoveOutcome) -> list[str]:
    """Report lines for an accepted or rejected move."""
    piece = outcome.piece
    if not outcome.accepted or piece is None:
        return [f"Invalid move: {outcome.rejection}"]

    move = outcome.move
    lines = [f"{piece.name} moved from {move.from_sq} to {move.to_sq}"]
    if outcome.captured is not None:
        lines.append(
            f"{piece.name} captured {outcome.captured.name} at {move.to_sq}"
        )
    if outcome.gives_check:
        lines.append(f"{outcome.state.current_player.title} is in check!")
    return lines


def replay(
    state: GameState,
    source: MoveSource,
    out: Callable[[str], None] = print,
) -> GameState:
    """Play every move from *source* starting at *state*; return final state.

    Rejected moves are reported and skipped. A malformed record stops the
    loop, as does the end of the source.
    """
    while True:
        try:
            record = source.next_move()
        except MovesFileError as exc:
            _LOGGER.debug("Unreadable move record: %s", exc)
            out(FORMAT_ERROR_MESSAGE)
            return state

        if record is None:
            out(GAME_OVER_MESSAGE)
            return state

        move = record_to_move(record)
        if move is None:
            _LOGGER.debug("Move record out of range: %s", record)
            out(FORMAT_ERROR_MESSAGE)
            return state

        out(
            f"\nProcessing {state.current_player.title} move "
            f"from {move.from_sq} to {move.to_sq}"
        )
        outcome = apply_move(state, move)
        for line in describe_outcome(outcome):
            out(line)
        if outcome.accepted:
            out(render_board(outcome.state.board))
            out("")
        state = outcome.state
