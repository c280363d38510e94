"""Tests for logging setup."""

from __future__ import annotations

import logging

from pressure_fields.logging_config import setup_logging


class TestSetupLogging:
    def test_level_and_single_handler(self):
        setup_logging(level=logging.DEBUG)
        setup_logging(level=logging.DEBUG)
        logger = logging.getLogger("pressure_fields")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        logger.handlers.clear()

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "sim.log"
        setup_logging(level=logging.INFO, log_file=str(log_file))
        logger = logging.getLogger("pressure_fields")
        for handler in logger.handlers:
            handler.flush()
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
