"""Structured logging configuration.

One stdout handler on the root logger, pipe-separated records.  The level
comes from ``settings.LOG_LEVEL`` unless the caller passes one.
"""

import logging
import sys

from workstream.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Per-request chatter of the HTTP stack under every portal call
QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "uvicorn.access")


def _resolve_level(level: str | None) -> int:
    name = (level or settings.LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | None = None) -> None:
    """Configure the gateway's root logger.

    Safe to call repeatedly (each app startup in tests does): existing root
    handlers are replaced, not stacked.
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
