"""
Tests for content_filter/logging_config.py
"""

import logging
import logging.handlers

import pytest

from content_filter import logging_config
from content_filter.logging_config import (
    enable_debug_logging,
    get_log_file_path,
    get_logger,
    resolve_level,
    setup_logging,
)


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


class TestSetupLogging:
    def test_default_log_file_in_log_dir(self):
        logger = setup_logging(console=False)

        assert logger.name == "content_filter"
        handlers = _file_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(get_log_file_path())
        assert get_log_file_path().parent.exists()

    def test_console_handler(self, tmp_path):
        logger = setup_logging(log_file=str(tmp_path / "a.log"), console=True)
        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_level(self, tmp_path):
        logger = setup_logging(level="warning", log_file=str(tmp_path / "a.log"))
        assert logger.level == logging.WARNING

    def test_unknown_level_defaults_to_info(self, tmp_path):
        logger = setup_logging(level="chatty", log_file=str(tmp_path / "a.log"))
        assert logger.level == logging.INFO

    def test_second_call_is_noop(self, tmp_path):
        logger = setup_logging(log_file=str(tmp_path / "a.log"))
        handlers = list(logger.handlers)

        setup_logging(level="DEBUG", log_file=str(tmp_path / "b.log"))

        assert logger.handlers == handlers

    def test_force_reconfigures(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"), console=False)
        logger = setup_logging(log_file=str(tmp_path / "b.log"), console=False, force=True)

        handlers = _file_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(tmp_path / "b.log")

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "moderation.log"
        setup_logging(log_file=str(log_file), console=False)

        get_logger("content_filter.tests").info("hello from the tests")
        for handler in logging.getLogger("content_filter").handlers:
            handler.flush()

        assert "hello from the tests" in log_file.read_text(encoding="utf-8")


class TestDebugLogging:
    def test_enable_debug_logging(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        logger = enable_debug_logging(log_file=str(tmp_path / "debug.log"))

        assert logger.level == logging.DEBUG
        assert _file_handlers(logger)[0].level == logging.DEBUG

    def test_initialized_flag(self, tmp_path):
        assert logging_config._logging_initialized is False
        setup_logging(log_file=str(tmp_path / "a.log"))
        assert logging_config._logging_initialized is True


class TestResolveLevel:
    def test_names_any_case(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" Warning ") == logging.WARNING

    def test_numeric_level(self):
        assert resolve_level(10) == logging.DEBUG
        assert resolve_level(25) == 25

    def test_unknown_name_falls_back_to_info(self, caplog):
        assert resolve_level("chatty") == logging.INFO
        assert "Unknown log level 'chatty'" in caplog.text

    @pytest.mark.parametrize("level", [-1, True, None, ["DEBUG"], 1.5])
    def test_rejects_non_levels(self, level):
        with pytest.raises(ValueError, match="Invalid log level"):
            resolve_level(level)

    def test_setup_accepts_numeric_level(self, tmp_path):
        logger = setup_logging(level=30, log_file=str(tmp_path / "a.log"), console=False)
        assert logger.level == logging.WARNING
