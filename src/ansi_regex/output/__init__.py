"""Output module for the ansi-regex CLI.

Provides consistent formatting, tables, and display helpers.
"""

from ansi_regex.output.console import console, escape_sequence, print_error, print_success
from ansi_regex.output.tables import create_matches_table

__all__ = [
    "console",
    "create_matches_table",
    "escape_sequence",
    "print_error",
    "print_success",
]
