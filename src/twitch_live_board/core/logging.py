from __future__ import annotations

import logging
from collections.abc import Iterable

# httpx logs each request URL at INFO; the token request carries the client secret in its query.
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(level: str, quiet_loggers: Iterable[str] = QUIET_LOGGERS) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
