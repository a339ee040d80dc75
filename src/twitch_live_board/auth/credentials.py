from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from twitch_live_board.core.models import Credentials

logger = logging.getLogger(__name__)


class CredentialProvider(Protocol):
    def load(self) -> Credentials | None: ...


class _TwitchEnvironment(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TWITCH_", extra="ignore")

    client_id: str = ""
    client_secret: str = ""


class _CredentialsFile(BaseModel):
    twitch_client_id: str = ""
    twitch_client_secret: str = ""


class EnvironmentCredentialProvider:
    """Reads ``TWITCH_CLIENT_ID`` / ``TWITCH_CLIENT_SECRET``."""

    def load(self) -> Credentials | None:
        env = _TwitchEnvironment()
        credentials = Credentials(client_id=env.client_id.strip(), client_secret=env.client_secret.strip())
        return credentials if credentials.is_complete else None


class JsonFileCredentialProvider:
    """Reads the local ``config.json`` used for development runs."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Credentials | None:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.debug("credentials file unavailable", extra={"path": str(self._path), "error": str(exc)})
            return None
        try:
            parsed = _CredentialsFile.model_validate_json(raw)
        except ValueError as exc:
            # ValidationError is a ValueError; bad UTF-8 surfaces as one too.
            logger.debug("credentials file unparsable", extra={"path": str(self._path), "error": str(exc)})
            return None
        credentials = Credentials(
            client_id=parsed.twitch_client_id.strip(),
            client_secret=parsed.twitch_client_secret.strip(),
        )
        return credentials if credentials.is_complete else None


def default_providers(credentials_file: Path) -> list[CredentialProvider]:
    return [EnvironmentCredentialProvider(), JsonFileCredentialProvider(credentials_file)]


def resolve_credentials(providers: Sequence[CredentialProvider]) -> Credentials:
    """Return the first complete credential pair, or an empty pair with a warning.

    Missing credentials are not fatal here; the token exchange fails loudly later.
    """
    for provider in providers:
        credentials = provider.load()
        if credentials is not None:
            logger.debug("credentials resolved", extra={"provider": type(provider).__name__})
            return credentials
    logger.warning("No Twitch credentials in environment or credentials file; authentication will fail")
    return Credentials()
