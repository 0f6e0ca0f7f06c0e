"""Text forms of the board: piece placement strings and the grid render."""

from __future__ import annotations

from chessref.core.board import Board
from chessref.core.piece import Piece
from chessref.core.types import BOARD_SIZE, FILES, Square, square_name

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_FILES_ROW = "   " + "".join(f"   {f}  " for f in FILES)
_SEPARATOR = "   +" + "-----+" * BOARD_SIZE

__all__ = [
    "STARTING_PLACEMENT",
    "board_from_placement",
    "placement_from_board",
    "render_board",
    "square_name",
]


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string (rank 8 first)."""
    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    pieces: dict[Square, Piece] = {}
    for rank_idx, rank_str in zip(range(BOARD_SIZE - 1, -1, -1), ranks):
        file_idx = 0
        for ch in rank_str:
            if ch.isdigit():
                skip = int(ch)
                if skip < 1 or skip > BOARD_SIZE:
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file_idx += skip
            else:
                if file_idx >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                pieces[Square(file_idx, rank_idx)] = Piece.from_char(ch)
                file_idx += 1
        if file_idx != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return Board.from_pieces(pieces)


def placement_from_board(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    ranks: list[str] = []
    for row in reversed(board.rows):
        parts: list[str] = []
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(piece.symbol)
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return "/".join(ranks)


def render_board(board: Board) -> str:
    """Render *board* as a framed grid, rank 8 at the top."""
    lines = [_FILES_ROW, _SEPARATOR]
    for rank in range(BOARD_SIZE - 1, -1, -1):
        cells = [p.symbol if p else " " for p in board.rows[rank]]
        lines.append(f"{rank + 1:2d} |  " + "  |  ".join(cells) + f"  |{rank + 1:2d}")
        lines.append(_SEPARATOR)
    lines.append(_FILES_ROW)
    return "\n".join(lines)
