"""Logging configuration.

Configures the root logger once at startup. The level comes from `LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import sys

from . import settings


def setup_logging(level: str | None = None) -> None:
    log_level = getattr(logging, (level or settings.log_level()).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Replace rather than stack handlers on repeated calls.
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
