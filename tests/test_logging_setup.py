"""Tests for CLI logging configuration."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
from rich.logging import RichHandler

from fsentry.config.models import LoggingSettings
from fsentry.logging_setup import configure_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("fsentry")
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(original_level)


def test_console_handler_uses_configured_level(package_logger: logging.Logger) -> None:
    configure_logging(LoggingSettings(level="info"))

    assert package_logger.level == logging.INFO
    assert [type(handler) for handler in package_logger.handlers] == [RichHandler]


def test_verbose_forces_debug(package_logger: logging.Logger) -> None:
    configure_logging(LoggingSettings(level="ERROR"), verbose=True)

    assert package_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_warning(package_logger: logging.Logger) -> None:
    configure_logging(LoggingSettings(level="chatty"))

    assert package_logger.level == logging.WARNING


def test_file_handler_writes_records(tmp_path: Path, package_logger: logging.Logger) -> None:
    log_file = tmp_path / "logs" / "fsentry.log"

    configure_logging(LoggingSettings(level="WARNING", file=str(log_file)))
    logging.getLogger("fsentry.entries.builder").warning("listing failed for %s", "/tmp/x")
    for handler in package_logger.handlers:
        handler.flush()

    assert len(package_logger.handlers) == 2
    assert "listing failed for /tmp/x" in log_file.read_text(encoding="utf-8")


def test_reconfiguring_replaces_handlers(package_logger: logging.Logger) -> None:
    configure_logging(LoggingSettings())
    configure_logging(LoggingSettings())

    assert len(package_logger.handlers) == 1
