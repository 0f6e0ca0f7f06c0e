"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def moves_path(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing the given lines to a moves file and returning its path."""

    def _write(*lines: str) -> Path:
        path = tmp_path / "moves.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


class ListSource:
    """In-memory move source yielding prepared records."""

    def __init__(self, records: list[list[int]]) -> None:
        self._records = list(records)

    def next_move(self) -> list[int] | None:
        if not self._records:
            return None
        return self._records.pop(0)


@pytest.fixture
def list_source() -> type[ListSource]:
    return ListSource
