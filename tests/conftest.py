from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import polars as pl
import pytest


def write_roster_xlsx(path: Path, rows: Sequence[Sequence[str | None]]) -> Path:
    columns = ["a", "b", "c", "d", "e"]
    padded = [list(row) + [None] * (len(columns) - len(row)) for row in rows]
    frame = pl.DataFrame(
        {name: [row[index] for row in padded] for index, name in enumerate(columns)},
        schema={name: pl.String for name in columns},
    )
    frame.write_excel(path, include_header=False)
    return path


@pytest.fixture(autouse=True)
def _isolate_twitch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TWITCH_CLIENT_ID", raising=False)
    monkeypatch.delenv("TWITCH_CLIENT_SECRET", raising=False)
