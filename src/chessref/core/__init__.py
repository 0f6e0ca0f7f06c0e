"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessref.core import Board, Move, parse_square, render_board

    board = Board.initial().with_move(Move(parse_square("e2"), parse_square("e4")))
    print(render_board(board))
"""

from chessref.core.board import Board
from chessref.core.enums import Color, PieceType
from chessref.core.move import Move
from chessref.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    placement_from_board,
    render_board,
)
from chessref.core.piece import Piece
from chessref.core.rules import (
    is_in_check,
    is_legal_move,
    is_path_clear,
    is_square_attacked,
)
from chessref.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Rules
    "is_in_check",
    "is_legal_move",
    "is_path_clear",
    "is_square_attacked",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "placement_from_board",
    "render_board",
]
