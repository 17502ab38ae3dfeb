"""Shared fixtures for the content_filter test suite."""

import logging

import pytest

from content_filter import logging_config


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep log files out of the home directory and reset the package logger."""
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(logging_config, "_logging_initialized", False)
    yield
    package_logger = logging.getLogger(logging_config.LOGGER_NAMESPACE)
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
