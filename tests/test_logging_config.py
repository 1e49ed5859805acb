"""
Tests for the logging setup driven by ``Settings``.
"""

import contextlib
import logging

import pytest

from customer_directory_api.app.core.config import Settings
from customer_directory_api.app.core.logging_config import (
    LOG_FORMAT,
    build_logging_config,
    configure_logging,
    resolve_level,
)


@contextlib.contextmanager
def bare_root_logger():
    """Detach the root logger's handlers, restoring them on exit.

    Used inside the test body because pytest attaches its capture
    handlers to the root logger for the call phase.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestResolveLevel:
    @pytest.mark.parametrize(
        "name, level",
        [("DEBUG", logging.DEBUG), ("debug", logging.DEBUG), (" warning ", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_known_names(self, name, level):
        assert resolve_level(name) == level

    @pytest.mark.parametrize("name", ["", "verbose", "Level 5"])
    def test_unknown_names_fall_back_to_info(self, name):
        assert resolve_level(name) == logging.INFO


class TestBuildLoggingConfig:
    def test_console_only_by_default(self):
        config = build_logging_config(Settings(log_level="WARNING", log_file=""))
        assert list(config["handlers"]) == ["console"]
        assert config["root"] == {"level": logging.WARNING, "handlers": ["console"]}
        assert config["formatters"]["default"]["format"] == LOG_FORMAT
        assert config["disable_existing_loggers"] is False

    def test_log_file_adds_file_handler(self, tmp_path):
        config = build_logging_config(Settings(log_file=str(tmp_path / "api.log")))
        file_handler = config["handlers"]["file"]
        assert file_handler["class"] == "logging.FileHandler"
        assert file_handler["filename"] == str((tmp_path / "api.log").resolve())
        assert config["root"]["handlers"] == ["console", "file"]


class TestConfigureLogging:
    def test_configures_bare_root_logger(self, tmp_path):
        log_file = tmp_path / "api.log"
        with bare_root_logger() as root:
            assert configure_logging(Settings(log_level="debug", log_file=str(log_file))) is True
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2

            logging.getLogger("customer_directory_api.tests").debug("stored %s", "abc")
            for handler in root.handlers:
                handler.flush()
        assert "[DEBUG] customer_directory_api.tests: stored abc" in log_file.read_text(encoding="utf-8")

    def test_leaves_configured_root_logger_alone(self):
        with bare_root_logger() as root:
            assert configure_logging(Settings(log_level="ERROR", log_file="")) is True
            handlers = root.handlers[:]

            assert configure_logging(Settings(log_level="DEBUG", log_file="")) is False
            assert root.handlers == handlers
            assert root.level == logging.ERROR
