"""
Tests for logging configuration.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from app.utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test handler setup."""

    def test_console_only(self, restore_root_logger):
        setup_logging(level="DEBUG")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_file_handler(self, restore_root_logger, tmp_path):
        setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
        root = restore_root_logger
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        logging.getLogger("app.test").info("hello")
        for h in root.handlers:
            h.flush()
        assert "hello" in (tmp_path / "logs" / "api.log").read_text()


class TestGetLogger:
    """Test named logger lookup."""

    def test_named_logger(self):
        assert get_logger("app.ui.app").name == "app.ui.app"

    def test_level_override(self):
        logger = get_logger("app.test.level", level="warning")
        assert logger.level == logging.WARNING
