"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessref.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable pair of origin and destination squares."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def file_delta(self) -> int:
        return self.to_sq.file - self.from_sq.file

    @property
    def rank_delta(self) -> int:
        return self.to_sq.rank - self.from_sq.rank

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse a four-character move such as ``'e2e4'``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
