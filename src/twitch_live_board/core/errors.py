from __future__ import annotations


class LiveBoardError(RuntimeError):
    """Base class for failures that abort a live-check run."""


class AuthenticationError(LiveBoardError):
    """Raised when Twitch does not hand out a usable access token."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body


class SourceReadError(LiveBoardError):
    """Raised when the roster file is missing or cannot be parsed."""


class SnapshotWriteError(LiveBoardError):
    """Raised when the snapshot file cannot be written."""


class SnapshotReadError(LiveBoardError):
    """Raised when an existing snapshot file is not a readable snapshot."""
