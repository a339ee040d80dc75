from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

import polars as pl

from twitch_live_board.core.errors import SourceReadError

logger = logging.getLogger(__name__)

IDENTIFIER_COLUMN: Final[int] = 0  # column A
INCLUDE_FLAG_COLUMN: Final[int] = 4  # column E
_EXCLUDED_FLAGS: Final[frozenset[str]] = frozenset({"no", "false"})
_CSV_SUFFIXES: Final[set[str]] = {".csv", ".tsv"}


def is_included(identifier: str, flag: str) -> bool:
    return bool(identifier) and bool(flag) and flag.lower() not in _EXCLUDED_FLAGS


def select_identifiers(rows: Iterable[Sequence[object]]) -> list[str]:
    """Filter data rows (header already removed) down to the roster."""
    identifiers: list[str] = []
    for row in rows:
        identifier = _cell_text(row, IDENTIFIER_COLUMN)
        flag = _cell_text(row, INCLUDE_FLAG_COLUMN)
        if is_included(identifier, flag):
            identifiers.append(identifier)
    return identifiers


def _cell_text(row: Sequence[object], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


class RosterLoader:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_identifiers(self) -> list[str]:
        frame = self._read_frame()
        # Row 0 is the header row.
        data_rows = frame.slice(1).rows()
        identifiers = select_identifiers(data_rows)
        logger.info(
            "loaded roster",
            extra={"path": str(self._path), "rows": len(data_rows), "identifiers": len(identifiers)},
        )
        return identifiers

    def _read_frame(self) -> pl.DataFrame:
        if not self._path.exists():
            raise SourceReadError(f"Roster file not found: {self._path}")
        try:
            if self._path.suffix.lower() in _CSV_SUFFIXES:
                return pl.read_csv(
                    self._path,
                    has_header=False,
                    separator="\t" if self._path.suffix.lower() == ".tsv" else ",",
                    infer_schema_length=0,
                    truncate_ragged_lines=True,
                )
            return pl.read_excel(
                self._path,
                sheet_id=1,
                has_header=False,
                infer_schema_length=0,
                drop_empty_rows=False,
                drop_empty_cols=False,
                raise_if_empty=False,
            )
        except Exception as exc:
            raise SourceReadError(f"Unreadable roster file {self._path}: {exc.__class__.__name__}: {exc}") from exc
