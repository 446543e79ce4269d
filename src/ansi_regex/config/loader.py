"""Configuration loader for ansi-regex settings.

Handles TOML file loading, path discovery, and resolution priority:
1. CLI arguments (highest priority)
2. TOML file (explicit or discovered)
3. Default values (lowest priority)
"""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ansi_regex.config.schema import AnsiRegexSettings, LogLevel
from ansi_regex.exceptions import ConfigError
from ansi_regex.logging import get_logger

_logger = get_logger("Config")

LOCAL_CONFIG_NAME = "ansi-regex.toml"
USER_CONFIG_PATH = Path.home() / ".config" / "ansi-regex" / "config.toml"


def load_config(
    config_path: Path | None = None,
    only_first: bool | None = None,
) -> AnsiRegexSettings:
    """Load and resolve ansi-regex configuration.

    Path discovery (when config_path is None):
    1. ./ansi-regex.toml (current directory)
    2. ~/.config/ansi-regex/config.toml (user config)
    3. Use defaults if neither exists

    Args:
        config_path: Explicit path to config TOML file
        only_first: Matcher mode (CLI override)

    Returns:
        AnsiRegexSettings: Resolved configuration

    Raises:
        ConfigError: If the TOML file cannot be read or parsed
        ConfigError: If a value fails validation
    """
    _logger.debug("Loading config: config_path={}, only_first={}", config_path, only_first)

    toml_config: dict[str, Any] = {}

    if config_path:
        _logger.debug("Loading explicit config file: {}", config_path)
        toml_config = _load_toml_file(config_path)
    else:
        discovered_path = discover_config_path()
        if discovered_path:
            _logger.debug("Discovered config file: {}", discovered_path)
            toml_config = _load_toml_file(discovered_path)
        else:
            _logger.debug("No config file found, using defaults")

    matcher_section = toml_config.get("matcher", {})
    if not isinstance(matcher_section, dict):
        _logger.error("Config [matcher] is not a table: {!r}", matcher_section)
        raise ConfigError("Invalid configuration: [matcher] must be a table")

    matcher_dict = dict(matcher_section)
    if only_first is not None:
        matcher_dict["only_first"] = only_first

    try:
        settings = AnsiRegexSettings(
            log_level=toml_config.get("log_level", LogLevel.WARNING),
            matcher=matcher_dict,
        )
    except ValidationError as e:
        _logger.error("Invalid configuration: {}", e)
        raise ConfigError(f"Invalid configuration: {e}") from e

    _logger.info(
        "Config loaded: only_first={}, log_level={}",
        settings.matcher.only_first, settings.log_level.value,
    )
    return settings


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
            _logger.debug("Successfully loaded TOML file: {}", path)
            return config
    except FileNotFoundError as e:
        _logger.error("Config file not found: {}", path)
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, tomllib.TOMLDecodeError) as e:
        _logger.error("Failed to parse config file {}: {}", path, e)
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e


def discover_config_path() -> Path | None:
    """Discover config file path following resolution order.

    Returns:
        Path: Path to existing config file, or None if not found
    """
    current_dir_config = Path(LOCAL_CONFIG_NAME)
    if current_dir_config.exists():
        return current_dir_config

    if USER_CONFIG_PATH.exists():
        return USER_CONFIG_PATH

    return None
