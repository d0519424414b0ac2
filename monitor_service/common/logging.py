"""
Logging configuration for the monitor service.
The request middleware, the store, and the error handlers all log through the root
handler set up here, as plain console lines at the `LOG_LEVEL` from settings.
"""

from __future__ import annotations

import logging

from monitor_service.common.settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
