"""Game state and the move transition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from chessref.core.board import Board
from chessref.core.enums import Color
from chessref.core.move import Move
from chessref.core.piece import Piece
from chessref.core.rules import is_in_check, is_legal_move

_LOGGER = logging.getLogger(__name__)


class Rejection(StrEnum):
    """Why a move was refused. Values are the user-facing messages."""

    NO_PIECE = "No piece at the starting position"
    WRONG_PLAYER = "Not the current player's piece"
    ILLEGAL_MOVE = "Invalid move"
    SELF_CHECK = "Move leaves the player in check"


@dataclass(frozen=True, slots=True)
class GameState:
    """Board plus the side to move. Replaced wholesale after each move."""

    board: Board
    current_player: Color

    @classmethod
    def initial(cls) -> GameState:
        return cls(Board.initial(), Color.WHITE)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`apply_move`.

    ``state`` is the new state when the move was accepted and the unchanged
    input state when it was rejected.
    """

    state: GameState
    move: Move
    rejection: Rejection | None = None
    piece: Piece | None = None
    captured: Piece | None = None
    gives_check: bool = False

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def _reject(state: GameState, move: Move, reason: Rejection) -> MoveOutcome:
    _LOGGER.debug("Rejected %s for %s: %s", move, state.current_player, reason)
    return MoveOutcome(state, move, rejection=reason)


def apply_move(state: GameState, move: Move) -> MoveOutcome:
    """Validate *move* for the side to move and apply it.

    Validation stops at the first failing check. A rejected move leaves the
    state untouched; the reason is returned, never raised.
    """
    board = state.board
    piece = board[move.from_sq]
    if piece is None:
        return _reject(state, move, Rejection.NO_PIECE)
    if piece.color != state.current_player:
        return _reject(state, move, Rejection.WRONG_PLAYER)
    if not is_legal_move(board, move, piece):
        return _reject(state, move, Rejection.ILLEGAL_MOVE)

    new_board = board.with_move(move)
    if is_in_check(new_board, state.current_player):
        return _reject(state, move, Rejection.SELF_CHECK)

    next_player = state.current_player.opposite
    new_state = GameState(new_board, next_player)
    outcome = MoveOutcome(
        new_state,
        move,
        piece=piece,
        captured=board[move.to_sq],
        gives_check=is_in_check(new_board, next_player),
    )
    _LOGGER.debug("Applied %s %s", piece.name, move)
    return outcome
