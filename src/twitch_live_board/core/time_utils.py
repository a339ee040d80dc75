from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def now_epoch_ms() -> int:
    return epoch_ms(utc_now())


def isoformat_z(value: datetime) -> str:
    """Render as e.g. ``2026-01-15T10:02:00.000Z``."""
    value_utc = value.astimezone(UTC)
    return value_utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
