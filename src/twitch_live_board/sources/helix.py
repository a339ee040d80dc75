from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import httpx

from twitch_live_board.auth.token_cache import TokenCache
from twitch_live_board.core.errors import AuthenticationError
from twitch_live_board.core.models import LiveRecord

logger = logging.getLogger(__name__)

MAX_LOGINS_PER_REQUEST = 100


def iter_batches(items: Sequence[str], size: int) -> Iterator[list[str]]:
    if size < 1:
        raise ValueError("batch size must be >= 1")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


class LiveStatusChecker:
    """Queries ``GET /streams`` for a roster, at most ``batch_size`` logins per request.

    A batch whose response carries no ``data`` list contributes nothing and the
    remaining batches still run. A 401 aborts the run because the bearer token is
    rejected for every batch alike.
    """

    def __init__(
        self,
        client: httpx.Client,
        token_cache: TokenCache,
        base_url: str,
        batch_size: int = MAX_LOGINS_PER_REQUEST,
    ) -> None:
        if not 1 <= batch_size <= MAX_LOGINS_PER_REQUEST:
            raise ValueError(f"batch_size must be within 1..{MAX_LOGINS_PER_REQUEST}")
        self._client = client
        self._token_cache = token_cache
        self._streams_url = f"{base_url.rstrip('/')}/streams"
        self._batch_size = batch_size

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def check_live(self, roster: Sequence[str]) -> list[LiveRecord]:
        live: list[LiveRecord] = []
        for index, batch in enumerate(iter_batches(roster, self._batch_size)):
            streams = self._fetch_batch(index, batch)
            live.extend(LiveRecord.from_stream(stream) for stream in streams)
        logger.info("checked live status", extra={"roster": len(roster), "live": len(live)})
        return live

    def _fetch_batch(self, index: int, batch: list[str]) -> list[dict[str, Any]]:
        token = self._token_cache.get_token()
        response = self._client.get(
            self._streams_url,
            params=[("user_login", login) for login in batch],
            headers={
                "Client-ID": self._token_cache.client_id,
                "Authorization": f"Bearer {token}",
            },
        )
        if response.status_code == 401:
            self._token_cache.invalidate()
            raise AuthenticationError(f"Twitch rejected the bearer token: {response.text}", body=response.text)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            logger.warning(
                "batch returned no stream data",
                extra={"batch": index, "size": len(batch), "status": response.status_code},
            )
            return []
        return [stream for stream in data if isinstance(stream, dict)]
