"""CLI text commands for ansi-regex.

Provides the commands that operate on text:
- strip: Remove escape sequences from a file or stdin
- scan: List escape sequences with their offsets
- pattern: Print the escape-sequence pattern
"""

from pathlib import Path
from typing import Annotated

import typer

from ansi_regex.config.loader import load_config
from ansi_regex.config.schema import AnsiRegexSettings, LogLevel
from ansi_regex.exceptions import AnsiRegexError
from ansi_regex.logging import configure_logging, get_logger
from ansi_regex.matcher import Matcher
from ansi_regex.output.console import console, print_error, print_success
from ansi_regex.output.tables import create_matches_table
from ansi_regex.pattern import PATTERN_STRING

_logger = get_logger("CLI.text")

# Undecodable bytes survive a read/write round trip unchanged
_ERRORS = "surrogateescape"

PathArgument = Annotated[
    Path | None,
    typer.Argument(help="Input file (reads stdin when omitted or '-')"),
]
OnlyFirstOption = Annotated[
    bool | None,
    typer.Option("--only-first/--all", help="Only act on the first escape sequence"),
]
ConfigOption = Annotated[Path | None, typer.Option("--config", "-c", help="Config file path")]
LogLevelOption = Annotated[
    LogLevel | None,
    typer.Option("--log-level", "-l", case_sensitive=False, help="Log level"),
]
EncodingOption = Annotated[str, typer.Option("--encoding", "-e", help="Text encoding")]


def _setup(
    config: Path | None, only_first: bool | None, log_level: LogLevel | None
) -> AnsiRegexSettings:
    """Resolve settings and configure logging, exiting with code 1 on bad config."""
    configure_logging(log_level=(log_level or LogLevel.WARNING).value)
    try:
        settings = load_config(config_path=config, only_first=only_first)
    except AnsiRegexError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if log_level is None and settings.log_level != LogLevel.WARNING:
        configure_logging(log_level=settings.log_level.value)
    return settings


def _read_input(path: Path | None, encoding: str) -> str:
    if path is None or str(path) == "-":
        _logger.debug("Reading stdin")
        data = typer.get_binary_stream("stdin").read()
    else:
        _logger.debug("Reading {}", path)
        try:
            data = path.read_bytes()
        except OSError as e:
            _logger.error("Cannot read {}: {}", path, e)
            print_error(f"Cannot read {path}: {e.strerror or e}")
            raise typer.Exit(code=1) from e
    try:
        return data.decode(encoding, errors=_ERRORS)
    except LookupError as e:
        print_error(f"Unknown encoding: {encoding}")
        raise typer.Exit(code=1) from e


def strip(
    path: PathArgument = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write result to this file instead of stdout"),
    ] = None,
    only_first: OnlyFirstOption = None,
    encoding: EncodingOption = "utf-8",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Remove ANSI escape sequences from text.

    Examples:
        ansi-regex strip build.log > build.txt
        some-command | ansi-regex strip
        ansi-regex strip session.log -o session.txt
    """
    settings = _setup(config, only_first, log_level)
    matcher = Matcher.from_config(settings.matcher)

    text = _read_input(path, encoding)
    cleaned = matcher.strip(text)
    _logger.info("Stripped {} characters", len(text) - len(cleaned))

    data = cleaned.encode(encoding, errors=_ERRORS)
    if output is None:
        stream = typer.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()
        return

    try:
        output.write_bytes(data)
    except OSError as e:
        _logger.error("Cannot write {}: {}", output, e)
        print_error(f"Cannot write {output}: {e.strerror or e}")
        raise typer.Exit(code=1) from e
    print_success(f"Wrote {output}")


def scan(
    path: PathArgument = None,
    only_first: OnlyFirstOption = None,
    encoding: EncodingOption = "utf-8",
    config: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """List ANSI escape sequences with their offsets.

    Examples:
        ansi-regex scan build.log
        ansi-regex scan --only-first build.log
    """
    settings = _setup(config, only_first, log_level)
    matcher = Matcher.from_config(settings.matcher)

    text = _read_input(path, encoding)
    matches = list(matcher.find_all(text))
    _logger.info("Found {} escape sequences", len(matches))

    if not matches:
        console.print("[yellow]No escape sequences found[/yellow]")
        return

    console.print(create_matches_table("Escape sequences", matches))
    noun = "sequence" if len(matches) == 1 else "sequences"
    console.print(f"\n[dim]{len(matches)} escape {noun}[/dim]")


def pattern() -> None:
    """Print the escape-sequence regular expression."""
    typer.echo(PATTERN_STRING)
