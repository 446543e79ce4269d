"""ansi-regex: find and strip ANSI escape sequences in text."""

__version__ = "0.1.0"

from ansi_regex.config.schema import MatcherConfig
from ansi_regex.exceptions import AnsiRegexError, ConfigError, InvalidTargetError
from ansi_regex.logging import configure_logging, get_logger
from ansi_regex.matcher import AnsiMatch, Matcher, create_matcher, strip_ansi
from ansi_regex.pattern import PATTERN, PATTERN_STRING

__all__ = [
    "__version__",
    "AnsiMatch",
    "AnsiRegexError",
    "ConfigError",
    "configure_logging",
    "create_matcher",
    "get_logger",
    "InvalidTargetError",
    "Matcher",
    "MatcherConfig",
    "PATTERN",
    "PATTERN_STRING",
    "strip_ansi",
]
