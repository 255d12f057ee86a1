"""Logging helpers."""

from __future__ import annotations

import logging

from fetchspine.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for the ``fetchspine`` loggers.

    Args:
        level: Level name. Defaults to the ``log_level`` setting.
    """
    effective_level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.INFO),
        format=LOG_FORMAT,
    )


__all__ = ["setup_logging"]
