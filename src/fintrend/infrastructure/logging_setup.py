"""Logging configuration for hosts embedding the engine.

Library modules only call ``logging.getLogger(__name__)``; the host calls
:func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from fintrend_config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    settings: Settings | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure console logging.

    - Console output with timestamps and module names
    - Configurable log level for fintrend modules (from settings)
    - WARNING level for noisy HTTP libraries
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=stream or sys.stdout,
        force=True,
    )

    logging.getLogger("fintrend").setLevel(log_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
