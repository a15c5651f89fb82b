from __future__ import annotations

import logging

import httpx

from httpwrap import DEFAULT_SERVER_CONFIG, Client
from httpwrap.logging_ import LOGGER_NAME, disable_debug_logging, enable_debug_logging


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_default_server_timeouts() -> None:
    assert DEFAULT_SERVER_CONFIG.as_dict() == {
        "read_timeout_s": 10.0,
        "read_header_timeout_s": 5.0,
        "write_timeout_s": 10.0,
        "idle_timeout_s": 600.0,
    }


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_enable_debug_logging_captures_requests(echo) -> None:
    handler = enable_debug_logging(_ListHandler())
    try:
        with Client(transport=echo.transport) as c:
            c.get("http://t/get?v=x")
        assert any("GET http://t/get?v=x -> 200" in m for m in handler.messages)
    finally:
        disable_debug_logging(handler)

    assert handler not in logging.getLogger(LOGGER_NAME).handlers
    assert logging.getLogger(LOGGER_NAME).level == logging.NOTSET


def test_enable_debug_logging_default_handler() -> None:
    handler = enable_debug_logging()
    try:
        assert isinstance(handler, logging.StreamHandler)
        assert logging.getLogger(LOGGER_NAME).isEnabledFor(logging.DEBUG)
    finally:
        disable_debug_logging(handler)
