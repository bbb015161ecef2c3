"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from triad_explorer.logging_config import parse_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("triad_explorer")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_file_handler_receives_records(self, package_logger, tmp_path):
        log_file = tmp_path / "explorer.log"
        setup_logging(logging.DEBUG, str(log_file))
        logging.getLogger("triad_explorer.core.explorer").info("Depth 0 -> 1")
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "triad_explorer.core.explorer - INFO - Depth 0 -> 1" in text

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1


class TestParseLevel:
    def test_names(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("WARNING") == logging.WARNING

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_level("chatty")
