"""Tests for logging utilities."""

import logging

from common.logger import get_logger


class TestGetLogger:
    """Tests for get_logger function."""

    def test_logger_name(self):
        """Test that logger has the requested name."""
        logger = get_logger("test.analysis.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.analysis.module"

    def test_default_level_is_info(self, monkeypatch):
        """Test that default logging level is INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logger = get_logger("test.analysis.default")
        assert logger.level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        """Test that LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        logger = get_logger("test.analysis.env_level")
        assert logger.level == logging.DEBUG

    def test_custom_level(self):
        """Test that an explicit level wins."""
        logger = get_logger("test.analysis.custom", level="WARNING")
        assert logger.level == logging.WARNING

    def test_reuses_existing_logger(self):
        """Test that get_logger does not add duplicate handlers."""
        logger1 = get_logger("test.analysis.reuse")
        logger2 = get_logger("test.analysis.reuse")
        assert logger1 is logger2
        assert len(logger1.handlers) == 1

    def test_info_level_filters_debug(self, caplog):
        """Test that INFO level filters out DEBUG messages."""
        logger = get_logger("test.analysis.filter", level="INFO")

        with caplog.at_level(logging.DEBUG):
            logger.debug("This should not appear")
            logger.info("This should appear")

        assert "This should not appear" not in caplog.text
        assert "This should appear" in caplog.text

