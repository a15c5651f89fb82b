from __future__ import annotations

import logging

LOGGER_NAME = "httpwrap"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def enable_debug_logging(handler: logging.Handler | None = None) -> logging.Handler:
    """Send this library's request logs to ``handler`` (stderr by default)."""
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def disable_debug_logging(handler: logging.Handler) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
