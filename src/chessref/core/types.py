"""Square value object and coordinate helpers.

Coordinates are zero-based ``(file, rank)`` pairs:
    a1 = (0, 0), h1 = (7, 0), a8 = (0, 7), h8 = (7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """A board coordinate. Bounds are not checked on construction."""

    file: int
    rank: int

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(0, 0)`` → ``'a1'``."""
    return chr(ord("a") + sq.file) + str(sq.rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 3)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(FILES.index(name[0]), RANKS.index(name[1]))


def is_valid_square(sq: Square) -> bool:
    """Check whether both coordinates lie on the board."""
    return 0 <= sq.file < BOARD_SIZE and 0 <= sq.rank < BOARD_SIZE


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
