"""Pytest configuration and shared fixtures."""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

# Configure consistent terminal settings for Rich/Typer in CI environments
os.environ.setdefault("COLUMNS", "200")
os.environ.setdefault("LINES", "50")
os.environ.setdefault("TERM", "xterm-256color")

from ansi_regex.logging import PACKAGE_NAME


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Drop handlers a test installed so later tests never write to closed streams."""
    yield
    logger.remove()
    logger.disable(PACKAGE_NAME)


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Provide a temporary directory for test isolation."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_toml(temp_dir: Path) -> Path:
    """Create a sample ansi-regex.toml for testing."""
    config_path = temp_dir / "ansi-regex.toml"
    config_path.write_text("""
log_level = "INFO"

[matcher]
only_first = true
""")
    return config_path


@pytest.fixture
def colored_log(temp_dir: Path) -> Path:
    """Create a log file containing colored output and a hyperlink."""
    log_path = temp_dir / "build.log"
    log_path.write_text(
        "foo\u001B[4mcake\u001B[0m bar\n"
        "\u001B]8;;https://example.com\u0007Click here\u001B]8;;\u0007\n",
        encoding="utf-8",
    )
    return log_path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner with consistent terminal settings."""
    return CliRunner(
        env={
            "COLUMNS": "200",
            "LINES": "50",
            "TERM": "xterm-256color",
            "NO_COLOR": "1",
        }
    )
