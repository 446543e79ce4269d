"""Matcher factory for ANSI escape sequences.

A Matcher wraps the shared compiled pattern together with its mode. It never
stores a scan position: each find_all() call returns a new lazy iterator, so
one matcher can serve any number of interleaved or concurrent scans.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from re import Pattern

from pydantic import ValidationError

from ansi_regex.config.schema import MatcherConfig
from ansi_regex.exceptions import ConfigError, InvalidTargetError
from ansi_regex.logging import get_logger
from ansi_regex.pattern import PATTERN

_logger = get_logger("Matcher")

# Every sequence starts with one of these, so each pass strictly reduces them
_INTRODUCERS = "\u001B\u009B"


@dataclass(frozen=True)
class AnsiMatch:
    """A single escape sequence found in a string."""

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


class Matcher:
    """Finds ANSI escape sequences in strings.

    With only_first=True every operation is scoped to the first escape
    sequence in the target: find_all() yields at most one match and strip()
    removes at most one sequence.
    """

    def __init__(self, only_first: bool = False) -> None:
        self._only_first = only_first

    @classmethod
    def from_config(cls, config: MatcherConfig) -> "Matcher":
        """Build a matcher from a validated MatcherConfig."""
        return cls(only_first=config.only_first)

    @property
    def only_first(self) -> bool:
        return self._only_first

    @property
    def pattern(self) -> Pattern[str]:
        """The compiled escape-sequence pattern."""
        return PATTERN

    def find_first(self, text: str) -> AnsiMatch | None:
        """Return the first escape sequence in text, or None if there is none."""
        _check_target(text)
        found = PATTERN.search(text)
        if found is None:
            return None
        return AnsiMatch(text=found.group(), start=found.start())

    def find_all(self, text: str) -> Iterator[AnsiMatch]:
        """Lazily yield non-overlapping escape sequences from left to right.

        The target is validated immediately; scanning only happens as the
        returned iterator is consumed.

        Raises:
            InvalidTargetError: If text is not a str.
        """
        _check_target(text)
        return self._scan(text)

    def _scan(self, text: str) -> Iterator[AnsiMatch]:
        for found in PATTERN.finditer(text):
            yield AnsiMatch(text=found.group(), start=found.start())
            if self._only_first:
                return

    def contains(self, text: str) -> bool:
        """Return True if text holds at least one escape sequence."""
        return self.find_first(text) is not None

    def strip(self, text: str, replacement: str = "") -> str:
        """Replace escape sequences in text with replacement.

        In all-matches mode the substitution repeats until no sequence is
        left, since removing a sequence nested inside another one can join
        its halves into a new sequence. Repeating stops after one pass when
        replacement itself holds an ESC or CSI character, as it could then
        rebuild sequences forever.

        Args:
            text: String to clean.
            replacement: Literal text substituted for each sequence.

        Returns:
            The cleaned string.
        """
        _check_target(text)
        if self._only_first:
            return PATTERN.sub(lambda _: replacement, text, count=1)

        repeat = not any(char in _INTRODUCERS for char in replacement)
        while True:
            text, removed = PATTERN.subn(lambda _: replacement, text)
            if not removed or not repeat:
                return text

    def __repr__(self) -> str:
        return f"Matcher(only_first={self._only_first})"


def _check_target(text: object) -> None:
    if not isinstance(text, str):
        raise InvalidTargetError(
            f"Expected str to scan for escape sequences, got {type(text).__name__}"
        )


def create_matcher(only_first: bool = False) -> Matcher:
    """Create a matcher for ANSI escape sequences.

    Args:
        only_first: Scope the matcher to the first escape sequence only.

    Returns:
        A new Matcher.

    Raises:
        ConfigError: If only_first is not a bool.

    Example:
        matcher = create_matcher()
        [m.text for m in matcher.find_all("\\x1b[1mbold\\x1b[0m")]
        # ["\\x1b[1m", "\\x1b[0m"]
    """
    try:
        config = MatcherConfig(only_first=only_first)
    except ValidationError as e:
        _logger.error("Rejected matcher option only_first={!r}", only_first)
        raise ConfigError(f"only_first must be a bool, got {only_first!r}") from e

    _logger.debug("Created matcher: only_first={}", config.only_first)
    return Matcher.from_config(config)


_default_matcher = Matcher()


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from text."""
    return _default_matcher.strip(text)
