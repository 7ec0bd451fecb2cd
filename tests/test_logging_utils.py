from __future__ import annotations

import logging

from solapi_messaging.logging_utils import configure_logging


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    configure_logging("debug")
    streams = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(streams) == 1
    assert logger.level == logging.DEBUG
    assert logger.name == "solapi_messaging"


def test_fetcher_logs_without_credentials(fetcher, opener, caplog) -> None:
    from solapi_messaging.models import RequestConfig

    opener.reply({})
    with caplog.at_level(logging.DEBUG, logger="solapi_messaging"):
        fetcher.fetch(RequestConfig(method="GET", url="https://api.solapi.com/cash/v1/balance"))
    assert "GET https://api.solapi.com/cash/v1/balance" in caplog.text
    assert "SECRET456" not in caplog.text
    assert "Authorization" not in caplog.text
