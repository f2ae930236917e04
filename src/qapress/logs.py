"""Logging setup for qapress, built on loguru."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from qapress.config import Settings

LOG_ROTATION = "1 day"
LOG_RETENTION = "7 days"


def configure_logging(settings: Settings) -> None:
    """Route loguru output according to ``settings``.

    Replaces the default sink with a stderr sink at ``settings.log_level``.
    When ``settings.log_dir`` is set, also writes a rotating application log
    and an errors-only log into that directory.
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)
    if not settings.log_dir:
        return
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(log_dir / "qapress.log"),
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level=settings.log_level,
    )
    logger.add(
        str(log_dir / "errors.log"),
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="ERROR",
    )
