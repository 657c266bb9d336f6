"""
Logging configuration helpers.
Library modules only create named loggers under `nsquery`; applications call `configure_logging` once at startup.
Only the `nsquery` logger tree is touched, so a host application's root logging setup is left alone.
"""

from __future__ import annotations

import logging

from nsquery.common.settings import get_settings

PACKAGE_LOGGER_NAME = "nsquery"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(handler: logging.Handler | None = None) -> logging.Logger:
    """Attach a handler to the `nsquery` logger at the level named by `LOG_LEVEL`."""

    global _LOGGING_CONFIGURED
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _LOGGING_CONFIGURED:
        return package_logger

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    package_handler = handler or logging.StreamHandler()
    package_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(package_handler)
    package_logger.setLevel(level)
    _LOGGING_CONFIGURED = True
    return package_logger
