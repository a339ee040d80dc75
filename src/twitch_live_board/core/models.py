from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class Credentials:
    client_id: str = ""
    client_secret: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)


@dataclass(frozen=True, slots=True)
class LiveRecord:
    username: str
    started_at: str
    title: str = ""
    game: str = ""

    @classmethod
    def from_stream(cls, stream: dict[str, Any]) -> LiveRecord:
        return cls(
            username=stream.get("user_name", ""),
            title=stream.get("title") or "",
            game=stream.get("game_name") or "",
            started_at=stream.get("started_at", ""),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "username": self.username,
            "title": self.title,
            "game": self.game,
            "started_at": self.started_at,
        }


@dataclass(frozen=True, slots=True)
class Snapshot:
    timestamp: str
    live: tuple[LiveRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "live": [record.to_dict() for record in self.live]}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Snapshot:
        return cls(
            timestamp=str(payload["timestamp"]),
            live=tuple(LiveRecord.from_stream(_as_stream(item)) for item in payload.get("live", [])),
        )


@dataclass(frozen=True, slots=True)
class RunSummary:
    roster_size: int
    batches: int
    live_count: int
    snapshot_path: Path
    snapshot_written: bool


def _as_stream(item: dict[str, Any]) -> dict[str, Any]:
    # Snapshot entries use the short field names, Helix uses user_name/game_name.
    return {
        "user_name": item.get("username", ""),
        "title": item.get("title", ""),
        "game_name": item.get("game", ""),
        "started_at": item.get("started_at", ""),
    }
