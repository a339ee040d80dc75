from __future__ import annotations

import logging
import math

import httpx

from twitch_live_board.auth.credentials import CredentialProvider, default_providers, resolve_credentials
from twitch_live_board.auth.token_cache import TokenCache
from twitch_live_board.core.config import Settings
from twitch_live_board.core.models import RunSummary
from twitch_live_board.sources.helix import LiveStatusChecker
from twitch_live_board.sources.roster import RosterLoader
from twitch_live_board.writer.snapshot import SnapshotWriter

logger = logging.getLogger(__name__)


class LiveCheckPipeline:
    """One pass: load roster, query Twitch in batches, overwrite the snapshot."""

    def __init__(
        self,
        settings: Settings,
        providers: list[CredentialProvider] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if providers is None:
            providers = default_providers(settings.credentials_file)
        credentials = resolve_credentials(providers)

        self._client = httpx.Client(timeout=settings.http_timeout_seconds, transport=transport)
        self.token_cache = TokenCache(
            client=self._client,
            credentials=credentials,
            token_url=settings.oauth_token_url,
            expiry_margin_seconds=settings.token_expiry_margin_seconds,
        )
        self.roster_loader = RosterLoader(settings.roster_path)
        self.checker = LiveStatusChecker(
            client=self._client,
            token_cache=self.token_cache,
            base_url=settings.helix_base_url,
            batch_size=settings.batch_size,
        )
        self.writer = SnapshotWriter(settings.snapshot_path)

    def close(self) -> None:
        self._client.close()

    def run_once(self) -> RunSummary:
        roster = self.roster_loader.load_identifiers()
        if not roster:
            logger.warning("No valid streamers found in roster", extra={"path": str(self.roster_loader.path)})
            return RunSummary(
                roster_size=0,
                batches=0,
                live_count=0,
                snapshot_path=self.writer.path,
                snapshot_written=False,
            )

        records = self.checker.check_live(roster)
        snapshot = self.writer.write_snapshot(records)
        return RunSummary(
            roster_size=len(roster),
            batches=math.ceil(len(roster) / self.checker.batch_size),
            live_count=len(snapshot.live),
            snapshot_path=self.writer.path,
            snapshot_written=True,
        )
