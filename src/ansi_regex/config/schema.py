"""Pydantic configuration schema models for ansi-regex settings."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class LogLevel(str, Enum):
    """Log levels accepted in config files and on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MatcherConfig(BaseModel):
    """Matcher construction options.

    only_first must be a real bool; truthy stand-ins such as 1 or "yes" are
    rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True)

    only_first: StrictBool = False


class AnsiRegexSettings(BaseModel):
    """Complete ansi-regex settings as read by the CLI."""

    log_level: LogLevel = LogLevel.WARNING
    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
