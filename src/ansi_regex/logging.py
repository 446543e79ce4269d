"""Logging configuration for ansi-regex using Loguru.

Provides bounded loggers with component prefixes. The package logger is
disabled on import so applications embedding the library see no output until
they call configure_logging() (the CLI does this for every command).
Log messages use {} placeholders for lazy evaluation - values are only
formatted when the log level is enabled.

Example:
    from ansi_regex.logging import get_logger

    logger = get_logger("Matcher")
    logger.debug("Created matcher: only_first={}", only_first)
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger as _base_logger

if TYPE_CHECKING:
    from loguru import Logger

PACKAGE_NAME = "ansi_regex"

_base_logger.disable(PACKAGE_NAME)


def configure_logging(
    log_level: str = "WARNING",
    log_dir: Path | None = None,
    console: bool = True,
) -> None:
    """Configure logging for ansi-regex.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for a rotating log file. No file is written when None.
        console: Whether to log to console (stderr).
    """
    _base_logger.remove()
    _base_logger.enable(PACKAGE_NAME)

    # Console handler with colors
    if console:
        _base_logger.add(
            sys.stderr,
            level=log_level,
            format="<level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | {message}",
            colorize=True,
        )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        _base_logger.add(
            log_dir / "ansi-regex.log",
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | [{extra[component]}]: {message}",
            rotation="10 MB",
            retention="7 days",
            compression="gz",
        )


def get_logger(component: str) -> Logger:
    """Get a bounded logger for a specific component.

    Args:
        component: Name of the component (e.g., "Matcher", "CLI", "Config").

    Returns:
        A loguru Logger bound to the component name.
    """
    return _base_logger.bind(component=component)
