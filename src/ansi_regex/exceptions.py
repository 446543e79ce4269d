"""Custom exception hierarchy for ansi-regex."""


class AnsiRegexError(Exception):
    """Base exception for all ansi-regex errors."""

    pass


class ConfigError(AnsiRegexError):
    """Configuration-related errors."""

    pass


class InvalidTargetError(AnsiRegexError, TypeError):
    """A matcher was asked to scan something that is not a str."""

    pass
