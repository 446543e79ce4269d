"""CLI config commands for ansi-regex.

Provides subcommands for configuration management:
- show: Display resolved configuration values
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from ansi_regex.config.loader import LOCAL_CONFIG_NAME, discover_config_path, load_config
from ansi_regex.config.schema import LogLevel
from ansi_regex.exceptions import AnsiRegexError
from ansi_regex.logging import configure_logging, get_logger
from ansi_regex.output.console import console, print_error

_logger = get_logger("CLI.config")

config_app = typer.Typer(
    name="config",
    help="Manage configuration",
    no_args_is_help=True,
)


@config_app.command()
def show(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file path"),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", "-l", case_sensitive=False, help="Log level"),
    ] = LogLevel.WARNING,
) -> None:
    """Show resolved configuration values.

    Examples:
        ansi-regex config show
        ansi-regex config show --config /path/to/config.toml
    """
    configure_logging(log_level=log_level.value)
    _logger.info("CLI config show command")

    config_file = config if config else discover_config_path()

    try:
        settings = load_config(config_path=config)
    except AnsiRegexError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print()
    if config_file:
        console.print(f"[cyan]Configuration file:[/cyan] {config_file}")
    else:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("[dim]Using default values[/dim]")
    console.print()

    source = "File" if config_file else "Default"

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Source", style="dim")

    table.add_row("log_level", settings.log_level.value, source)
    table.add_row("", "", "")
    table.add_row("[bold]Matcher[/bold]", "", "")
    table.add_row("  only_first", str(settings.matcher.only_first).lower(), source)

    panel = Panel(table, title="[bold cyan]Configuration[/bold cyan]", border_style="cyan")
    console.print(panel)
    console.print()

    console.print("[dim]Config search paths:[/dim]")
    console.print(f"  [dim]1.[/dim] ./{LOCAL_CONFIG_NAME}")
    console.print("  [dim]2.[/dim] ~/.config/ansi-regex/config.toml")
    console.print()
