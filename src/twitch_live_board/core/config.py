from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TLB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    roster_path: Path = Field(default=Path("streamers.xlsx"))
    snapshot_path: Path = Field(default=Path("live.json"))
    credentials_file: Path = Field(default=Path("config.json"))

    oauth_token_url: str = "https://id.twitch.tv/oauth2/token"
    helix_base_url: str = "https://api.twitch.tv/helix"

    batch_size: int = Field(default=100, ge=1, le=100)
    token_expiry_margin_seconds: int = Field(default=60, ge=0)
    http_timeout_seconds: float = Field(default=20.0, gt=0)

    log_level: str = "INFO"
