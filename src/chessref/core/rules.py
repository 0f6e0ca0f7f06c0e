"""Move legality and check detection.

Legality here is geometric only: it covers piece movement, path clearance
and pawn pushes/captures, but not whether the move exposes the mover's own
king. There is no castling, en passant or promotion.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessref.core.enums import Color, PieceType
from chessref.core.move import Move
from chessref.core.types import Square

if TYPE_CHECKING:
    from chessref.core.board import Board
    from chessref.core.piece import Piece

_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, move: Move) -> bool:
    """Whether every square strictly between the endpoints is empty."""
    step_file = _sign(move.file_delta)
    step_rank = _sign(move.rank_delta)
    file = move.from_sq.file + step_file
    rank = move.from_sq.rank + step_rank
    while (file, rank) != (move.to_sq.file, move.to_sq.rank):
        if not board.is_empty(Square(file, rank)):
            return False
        file += step_file
        rank += step_rank
    return True


# -- Piece-specific geometry -------------------------------------------------


def _king_move(board: Board, move: Move, color: Color) -> bool:
    return abs(move.file_delta) <= 1 and abs(move.rank_delta) <= 1


def _rook_move(board: Board, move: Move, color: Color) -> bool:
    if move.file_delta != 0 and move.rank_delta != 0:
        return False
    return is_path_clear(board, move)


def _bishop_move(board: Board, move: Move, color: Color) -> bool:
    if abs(move.file_delta) != abs(move.rank_delta):
        return False
    return is_path_clear(board, move)


def _queen_move(board: Board, move: Move, color: Color) -> bool:
    return _rook_move(board, move, color) or _bishop_move(board, move, color)


def _knight_move(board: Board, move: Move, color: Color) -> bool:
    return (abs(move.file_delta), abs(move.rank_delta)) in ((1, 2), (2, 1))


def _pawn_move(board: Board, move: Move, color: Color) -> bool:
    direction = _PAWN_DIRECTION[color]
    df, dr = move.file_delta, move.rank_delta
    target = board[move.to_sq]

    if df == 0:
        if dr == direction:
            return target is None
        if dr == 2 * direction and move.from_sq.rank == _PAWN_START_RANK[color]:
            between = Square(move.from_sq.file, move.from_sq.rank + direction)
            return board.is_empty(between) and target is None
        return False

    if abs(df) == 1 and dr == direction:
        return target is not None and target.color != color
    return False


_PIECE_RULES: dict[PieceType, Callable[[Board, Move, Color], bool]] = {
    PieceType.KING: _king_move,
    PieceType.QUEEN: _queen_move,
    PieceType.ROOK: _rook_move,
    PieceType.BISHOP: _bishop_move,
    PieceType.KNIGHT: _knight_move,
    PieceType.PAWN: _pawn_move,
}


# -- Public API ----------------------------------------------------------------


def is_legal_move(board: Board, move: Move, piece: Piece) -> bool:
    """Whether *piece* may make *move* on *board*, ignoring self-check."""
    target = board[move.to_sq]
    if target is not None and target.color == piece.color:
        return False
    return _PIECE_RULES[piece.piece_type](board, move, piece.color)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* reachable by a legal move of any piece of *by_color*?"""
    return any(
        is_legal_move(board, Move(from_sq, sq), piece)
        for from_sq, piece in board.squares(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    The board must hold a king of *color*; ``Board.king_square`` raises
    ``ValueError`` otherwise.
    """
    return is_square_attacked(board, board.king_square(color), color.opposite)
