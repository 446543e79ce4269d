"""Shared console and output helpers for the ansi-regex CLI.

Provides a single Console instance and formatting utilities.
"""

from rich.console import Console
from rich.markup import escape

# Shared console instance - use this everywhere for consistent output
console = Console()


def escape_sequence(sequence: str) -> str:
    """Render an escape sequence with its control characters made visible.

    Args:
        sequence: Raw matched sequence.

    Returns:
        Printable form, e.g. "\\x1b[31m" or "\\x9b2J".
    """
    return sequence.encode("unicode_escape").decode("ascii")


def print_success(message: str) -> None:
    """Print a success message with green checkmark.

    Args:
        message: The message to display.
    """
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str, suggestion: str | None = None) -> None:
    """Print an error message with red X and optional suggestion.

    Args:
        message: The error message.
        suggestion: Optional suggestion for how to fix the error.
    """
    console.print(f"[red]✗ {escape(message)}[/red]")
    if suggestion:
        console.print(f"\n{suggestion}")

