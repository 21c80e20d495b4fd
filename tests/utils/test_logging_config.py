"""
Tests for logging configuration.
"""

import logging

import pytest

from app.utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging and get_logger."""

    def test_console_only(self, restore_root_logger):
        setup_logging(level="warning")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_file_handler(self, restore_root_logger, tmp_path):
        setup_logging(log_file="api.log", level="DEBUG", log_dir=str(tmp_path / "logs"))
        get_logger("app.tests").info("favorites saved")
        for handler in restore_root_logger.handlers:
            handler.flush()

        content = (tmp_path / "logs" / "api.log").read_text(encoding="utf-8")
        assert "favorites saved" in content
        assert " - app.tests - INFO - " in content

    def test_get_logger_level_override(self):
        logger = get_logger("app.tests.override", level="error")
        assert logger.level == logging.ERROR
