"""CLI entry point for ansi-regex."""

import typer

from ansi_regex.cli.config import config_app
from ansi_regex.cli.text import pattern, scan, strip

app = typer.Typer(
    name="ansi-regex",
    help="Find and strip ANSI escape sequences",
    no_args_is_help=True,
)

app.command()(strip)
app.command()(scan)
app.command()(pattern)
app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from ansi_regex import __version__

        typer.echo(f"ansi-regex version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """ansi-regex: find and strip ANSI escape sequences."""
    pass
