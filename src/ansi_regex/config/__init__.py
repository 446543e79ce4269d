"""Configuration module for ansi-regex."""

from ansi_regex.config.loader import discover_config_path, load_config
from ansi_regex.config.schema import AnsiRegexSettings, LogLevel, MatcherConfig

__all__ = [
    "AnsiRegexSettings",
    "discover_config_path",
    "load_config",
    "LogLevel",
    "MatcherConfig",
]
