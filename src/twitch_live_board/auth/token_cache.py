from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from twitch_live_board.core.errors import AuthenticationError
from twitch_live_board.core.models import Credentials
from twitch_live_board.core.time_utils import now_epoch_ms

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CachedToken:
    token: str | None = None
    expires_at_ms: int = 0


class TokenCache:
    """Single-slot app access token cache backed by the client-credentials grant.

    Not safe for concurrent use: callers sharing one instance across threads
    must serialize ``get_token``.
    """

    def __init__(
        self,
        client: httpx.Client,
        credentials: Credentials,
        token_url: str,
        expiry_margin_seconds: int = 60,
        clock: Callable[[], int] = now_epoch_ms,
    ) -> None:
        self._client = client
        self._credentials = credentials
        self._token_url = token_url
        self._margin_ms = expiry_margin_seconds * 1000
        self._clock = clock
        self._cached = CachedToken()

    @property
    def client_id(self) -> str:
        return self._credentials.client_id

    @property
    def cached(self) -> CachedToken:
        return self._cached

    def get_token(self) -> str:
        now = self._clock()
        if self._cached.token and now < self._cached.expires_at_ms:
            return self._cached.token

        response = self._client.post(
            self._token_url,
            params={
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "grant_type": "client_credentials",
            },
        )
        try:
            payload = response.json()
        except ValueError:
            payload = None

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise AuthenticationError(f"Failed to fetch Twitch token: {response.text}", body=response.text)

        expires_in = _lifetime_seconds(payload.get("expires_in"))
        if expires_in is None:
            raise AuthenticationError(
                f"Twitch token response has no usable expires_in: {response.text}", body=response.text
            )
        self._cached = CachedToken(token=token, expires_at_ms=now + expires_in * 1000 - self._margin_ms)
        logger.info("refreshed twitch token", extra={"expires_in": expires_in})
        return token

    def invalidate(self) -> None:
        self._cached = CachedToken()


def _lifetime_seconds(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        return int(value)
    except (ValueError, OverflowError):
        return None
