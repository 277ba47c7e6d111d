# backend/app/core/logging_config.py
"""
Console logging for myservice.

One plain line per event on stdout: the startup confirmation and the
bind failure are the only lines the service emits itself.
"""
from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <5} | {message}"


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default stderr sink with a stdout sink."""
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        format=LOG_FORMAT,
        colorize=False,
    )
