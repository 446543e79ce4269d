"""Table factory methods for the ansi-regex CLI."""

from collections.abc import Iterable

from rich.table import Table
from rich.text import Text

from ansi_regex.matcher import AnsiMatch
from ansi_regex.output.console import escape_sequence


def create_matches_table(title: str, matches: Iterable[AnsiMatch]) -> Table:
    """Create a table listing escape sequences with their offsets.

    Args:
        title: Table title.
        matches: Matches to list, in scan order.

    Returns:
        A Rich Table populated with one row per match.
    """
    table = Table(title=title, expand=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Start", style="green", justify="right")
    table.add_column("End", style="green", justify="right")
    table.add_column("Sequence", style="cyan", no_wrap=True)

    for index, match in enumerate(matches, start=1):
        table.add_row(
            str(index),
            str(match.start),
            str(match.end),
            Text(escape_sequence(match.text)),
        )

    return table
