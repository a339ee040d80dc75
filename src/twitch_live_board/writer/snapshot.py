from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from twitch_live_board.core.errors import SnapshotReadError, SnapshotWriteError
from twitch_live_board.core.models import LiveRecord, Snapshot
from twitch_live_board.core.time_utils import isoformat_z, utc_now

logger = logging.getLogger(__name__)


class SnapshotWriter:
    def __init__(self, path: Path, clock: Callable[[], datetime] = utc_now) -> None:
        self._path = path
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def write_snapshot(self, records: Sequence[LiveRecord]) -> Snapshot:
        snapshot = Snapshot(timestamp=isoformat_z(self._clock()), live=tuple(records))
        body = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)

        tmp_path = self._path.parent / f".{self._path.name}.{uuid.uuid4().hex}.tmp"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(body, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise SnapshotWriteError(f"Could not write snapshot {self._path}: {exc}") from exc

        logger.info("wrote snapshot", extra={"path": str(self._path), "live": len(snapshot.live)})
        return snapshot


def read_snapshot(path: Path) -> Snapshot:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, ValueError) as exc:
        raise SnapshotReadError(f"Could not read snapshot {path}: {exc}") from exc
    live = payload.get("live", []) if isinstance(payload, dict) else None
    if not isinstance(live, list) or "timestamp" not in payload or not all(isinstance(item, dict) for item in live):
        raise SnapshotReadError(f"Not a live snapshot: {path}")
    return Snapshot.from_dict(payload)
