"""Logging configuration for the command line."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs go to stderr so that stdout only ever carries the resolved date.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
