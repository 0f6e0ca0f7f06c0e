"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from chessref.core.enums import Color, PieceType
from chessref.core.piece import Piece
from chessref.core.types import BOARD_SIZE, Square

if TYPE_CHECKING:
    from chessref.core.move import Move

Row = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
_EMPTY_ROW: Row = (None,) * BOARD_SIZE


class Board:
    """Immutable 8x8 grid of optional pieces, stored as ``rows[rank][file]``.

    Every update returns a new board. Rows that did not change are shared
    between the old and the new board.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...] | None = None) -> None:
        if rows is None:
            rows = (_EMPTY_ROW,) * BOARD_SIZE
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board must be 8x8")
        self._rows: tuple[Row, ...] = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.rank][sq.file]

    def is_empty(self, sq: Square) -> bool:
        return self._rows[sq.rank][sq.file] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        """Ranks in storage order, rank 1 first."""
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def squares(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, optionally for one *color*."""
        for rank, row in enumerate(self._rows):
            for file, piece in enumerate(row):
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield Square(file, rank), piece

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.squares(color):
            if piece == king:
                return sq
        raise ValueError(f"No {color.name} king on board")

    # -- Updates ------------------------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """New board with *sq* set to *piece* (``None`` clears it)."""
        row = list(self._rows[sq.rank])
        row[sq.file] = piece
        rows = list(self._rows)
        rows[sq.rank] = tuple(row)
        return Board(tuple(rows))

    def with_move(self, move: Move) -> Board:
        """New board with the origin piece relocated to the destination.

        No legality check is done: whatever stood on the destination is
        overwritten.
        """
        piece = self[move.from_sq]
        return self.with_piece(move.from_sq, None).with_piece(move.to_sq, piece)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls(
            (
                tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK),
                (Piece(Color.WHITE, PieceType.PAWN),) * BOARD_SIZE,
                _EMPTY_ROW,
                _EMPTY_ROW,
                _EMPTY_ROW,
                _EMPTY_ROW,
                (Piece(Color.BLACK, PieceType.PAWN),) * BOARD_SIZE,
                tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK),
            )
        )

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for sq, piece in pieces.items():
            grid[sq.rank][sq.file] = piece
        return cls(tuple(tuple(row) for row in grid))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self._rows[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
