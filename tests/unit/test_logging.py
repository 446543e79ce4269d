"""Behavioral tests for logging configuration module.

Tests verify public behavior of logging configuration:
- the package logger is silent until configure_logging() runs
- configure_logging sets up console and optional file handlers
- get_logger returns bounded logger with component name
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

from loguru import logger

from ansi_regex.logging import PACKAGE_NAME, configure_logging, get_logger


class TestConfigureLogging:
    """Verify configure_logging() behavior for setting up loggers."""

    def test_enables_package_logger(self) -> None:
        """configure_logging should enable the package logger."""
        with patch("ansi_regex.logging._base_logger") as mock_logger:
            configure_logging(log_level="INFO", console=False)

            mock_logger.enable.assert_called_once_with(PACKAGE_NAME)
            mock_logger.remove.assert_called_once_with()

    def test_console_true_adds_stderr_handler(self) -> None:
        """Should add a stderr handler when console=True."""
        with patch("ansi_regex.logging._base_logger") as mock_logger:
            mock_logger.add = MagicMock()

            configure_logging(log_level="DEBUG", console=True)

            first_call_arg = mock_logger.add.call_args_list[0][0][0]
            assert first_call_arg == sys.stderr
            assert mock_logger.add.call_args_list[0][1]["level"] == "DEBUG"

    def test_console_false_adds_no_handler_without_log_dir(self) -> None:
        """Should add no handlers when console=False and no log_dir is given."""
        with patch("ansi_regex.logging._base_logger") as mock_logger:
            mock_logger.add = MagicMock()

            configure_logging(log_level="INFO", console=False)

            mock_logger.add.assert_not_called()

    def test_log_dir_adds_file_handler(self, tmp_path: Path) -> None:
        """Should create log_dir and add a file handler inside it."""
        log_dir = tmp_path / "nested" / "logs"

        with patch("ansi_regex.logging._base_logger") as mock_logger:
            mock_logger.add = MagicMock()

            configure_logging(log_level="INFO", log_dir=log_dir, console=False)

            assert log_dir.is_dir()
            sinks = [call[0][0] for call in mock_logger.add.call_args_list]
            assert sinks == [log_dir / "ansi-regex.log"]

    def test_messages_reach_configured_sink(self, tmp_path: Path) -> None:
        """Messages from package loggers should be written once enabled."""
        configure_logging(log_level="DEBUG", log_dir=tmp_path, console=False)

        get_logger("Matcher").debug("Created matcher: only_first={}", True)
        logger.complete()

        content = (tmp_path / "ansi-regex.log").read_text()
        assert "[Matcher]: Created matcher: only_first=True" in content


class TestGetLogger:
    """Verify get_logger() returns bounded logger."""

    def test_get_logger_binds_component(self) -> None:
        """Logged records should carry the component name."""
        records: list[dict] = []
        logger.enable(PACKAGE_NAME)
        sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            get_logger("TestComponent").info("hello")
        finally:
            logger.remove(sink_id)

        assert records[0]["extra"]["component"] == "TestComponent"
        assert records[0]["message"] == "hello"

    def test_get_logger_with_different_components(self) -> None:
        """Should return usable loggers for different components."""
        logger1 = get_logger("Component1")
        logger2 = get_logger("Component2")

        assert hasattr(logger1, "info")
        assert hasattr(logger2, "info")
