"""Moves-file reader.

One move per line, written as origin and destination squares, e.g. ``e2e4``.
Blank lines and lines starting with ``#`` are skipped. Records come out as
``[from_file, from_row, to_file, to_row]`` where rows count from the top of
the board, so row 0 is rank 8. Range checks are left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import IO, Protocol

_LOGGER = logging.getLogger(__name__)

_DIGITS = "0123456789"

MoveRecord = list[int]


class MovesFileError(ValueError):
    """A line of the moves file cannot be read as a move."""


class MoveSource(Protocol):
    """Anything that hands out move records until it runs dry."""

    def next_move(self) -> MoveRecord | None: ...


def parse_move_line(line: str) -> MoveRecord:
    """Turn ``'e2e4'`` into ``[4, 6, 4, 4]``."""
    text = line.strip()
    if len(text) != 4:
        raise MovesFileError(f"Invalid move line: {line!r}")
    record: MoveRecord = []
    for file_ch, rank_ch in (text[0:2], text[2:4]):
        if rank_ch not in _DIGITS:
            raise MovesFileError(f"Invalid move line: {line!r}")
        record.append(ord(file_ch.lower()) - ord("a"))
        record.append(8 - int(rank_ch))
    return record


class MovesFile:
    """Sequential reader over a moves file.

    Args:
        path: File to read. Opening a missing file raises
            ``FileNotFoundError``.
    """

    __slots__ = ("_path", "_handle", "_line_no")

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._handle: IO[str] = self._path.open(encoding="utf-8")
        self._line_no = 0
        _LOGGER.debug("Opened moves file %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def next_move(self) -> MoveRecord | None:
        """Next record, or ``None`` once the file is exhausted."""
        for line in self._handle:
            self._line_no += 1
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            try:
                return parse_move_line(text)
            except MovesFileError as exc:
                raise MovesFileError(f"{self._path}:{self._line_no}: {exc}") from None
        return None

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> MovesFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[MoveRecord]:
        while (record := self.next_move()) is not None:
            yield record
