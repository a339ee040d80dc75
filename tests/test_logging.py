import logging

from twitch_live_board.core.logging import configure_logging


def test_configure_logging_quiets_request_loggers() -> None:
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    logging.getLogger("extra.client").setLevel(logging.NOTSET)

    configure_logging("debug", quiet_loggers=("httpx", "extra.client"))

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("extra.client").level == logging.WARNING
