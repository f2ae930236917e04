"""Tests for logging setup."""

import sys

from loguru import logger

from qapress.config import Settings
from qapress.logs import configure_logging


def _settings(log_dir=""):
    return Settings(
        db_path=":memory:",
        host="127.0.0.1",
        port=3000,
        log_level="INFO",
        log_dir=log_dir,
        seed_on_start=False,
    )


def test_file_sinks_written(tmp_path):
    log_dir = tmp_path / "logs"
    configure_logging(_settings(str(log_dir)))
    try:
        logger.info("hello from test")
        logger.error("something broke")
    finally:
        # removing the handlers closes and flushes the files
        logger.remove()
        logger.add(sys.stderr)
    assert "hello from test" in (log_dir / "qapress.log").read_text(encoding="utf-8")
    errors = (log_dir / "errors.log").read_text(encoding="utf-8")
    assert "something broke" in errors
    assert "hello from test" not in errors


def test_console_only(tmp_path):
    configure_logging(_settings())
    try:
        logger.info("console only")
    finally:
        logger.remove()
        logger.add(sys.stderr)
    assert list(tmp_path.iterdir()) == []
