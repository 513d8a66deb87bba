"""
ANSI MH10.8.2 CLI

Command-line front end for parsing and inspecting data identifiers.

Usage:
    python -m src.ansi_mh10 parse "06<GS>D050203<GS>9N12345<RS>"
    python -m src.ansi_mh10 parse --file label.txt --json
    python -m src.ansi_mh10 describe 9N
    python -m src.ansi_mh10 --help

Exit codes of the parse command:
    0  every field resolved cleanly
    1  at least one field carries a non-fatal error
    2  at least one result is fatal
"""

from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.ansi_mh10.config import load_config
from src.ansi_mh10.core.constants import (
    END_OF_TRANSMISSION,
    FIELD_SEPARATOR,
    RECORD_SEPARATOR,
)
from src.ansi_mh10.core.identifiers import descriptor_key
from src.ansi_mh10.core.models import UNRESOLVED, ResolvedDataIdentifier, category_of
from src.ansi_mh10.factory import create_parser, create_resolver
from src.common.logging import configure_logging, get_logger, render_control_characters

logger = get_logger(__name__)

console = Console()

app = typer.Typer(
    name="ansi-mh10",
    help="ANSI MH10.8.2 data identifier parser",
    no_args_is_help=True,
)

# Escape notations accepted on the command line
_NAMED_ESCAPES = {
    "GS": FIELD_SEPARATOR,
    "RS": RECORD_SEPARATOR,
    "EOT": END_OF_TRANSMISSION,
}
_ESCAPE_PATTERN = re.compile(r"<(GS|RS|EOT)>|\\x([0-9A-Fa-f]{2})")

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_FATAL = 2


def expand_escapes(text: str) -> str:
    """
    Expand <GS>, <RS>, <EOT> and \\xNN escapes into control characters.

    Literal control characters are left unchanged.
    """

    def _expand(match: re.Match[str]) -> str:
        if match.group(1):
            return _NAMED_ESCAPES[match.group(1)]
        return chr(int(match.group(2), 16))

    return _ESCAPE_PATTERN.sub(_expand, text)


def exit_code_for(results: list[ResolvedDataIdentifier]) -> int:
    """Map parse results to the command's exit code."""
    if any(result.is_fatal for result in results):
        return EXIT_FATAL
    if any(result.is_error for result in results):
        return EXIT_ERRORS
    return EXIT_OK


def _read_input(data: str | None, file: Path | None) -> str:
    if data is not None and file is not None:
        raise typer.BadParameter("Pass DATA or --file, not both")

    if file is not None:
        try:
            text = file.read_text(encoding="utf-8")
        except OSError as e:
            raise typer.BadParameter(f"Cannot read {file}: {e}") from e
    elif data is not None:
        return expand_escapes(data)
    else:
        text = sys.stdin.read()

    # Line terminator added by editors and shells
    return expand_escapes(text.rstrip("\r\n"))


def _print_results(results: list[ResolvedDataIdentifier]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Pos", justify="right")
    table.add_column("DI")
    table.add_column("Key", justify="right")
    table.add_column("Title")
    table.add_column("Value")
    table.add_column("Errors")

    for result in results:
        error_lines = []
        for error in result.errors:
            color = "red" if error.is_fatal else "yellow"
            error_lines.append(f"[{color}]{error.code}[/{color}] {escape(error.message)}")

        table.add_row(
            str(result.position),
            escape(render_control_characters(result.identifier)),
            str(result.key) if result.key != UNRESOLVED else "-",
            escape(result.title),
            escape(render_control_characters(result.value)),
            "\n".join(error_lines) if error_lines else "[green]OK[/green]",
        )

    console.print(table)


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (default: from config)"),
    ] = None,
) -> None:
    """ANSI MH10.8.2 data identifier parser."""
    level_name = (log_level or load_config().log_level).upper()
    configure_logging(getattr(logging, level_name, logging.INFO))


@app.command("parse")
def parse_command(
    data: Annotated[
        str | None,
        typer.Argument(help="Data to parse; <GS>, <RS>, <EOT> and \\xNN are expanded"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read data from a file"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
    position: Annotated[
        int,
        typer.Option("--position", "-p", help="Offset reported for the first character"),
    ] = 0,
) -> None:
    """
    Parse MH10.8.2 data.

    Reads DATA, the --file contents, or stdin when neither is given.
    """
    text = _read_input(data, file)
    logger.debug(f"Parsing {len(text)} characters: {text}")

    results = create_parser().parse_all(text, initial_position=position)

    if json_output:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        _print_results(results)

    raise typer.Exit(exit_code_for(results))


@app.command("describe")
def describe_command(
    identifier: Annotated[str, typer.Argument(help="Data identifier, e.g. 9N or D")],
) -> None:
    """Show the catalog entry for a data identifier."""
    key = descriptor_key(expand_escapes(identifier))
    descriptor = create_resolver().catalog.lookup(key) if key != UNRESOLVED else None

    if descriptor is None:
        console.print(f"[red]Error:[/red] Unknown data identifier '{escape(identifier)}'")
        raise typer.Exit(1)

    category = category_of(key)

    table = Table(title=f"Data Identifier: [cyan]{escape(identifier)}[/cyan]")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Key", str(key))
    table.add_row("Category", category.name if category is not None else "-")
    table.add_row("Title", escape(descriptor.title))
    table.add_row("Description", escape(descriptor.description))
    table.add_row("Pattern", escape(descriptor.pattern_source))
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from src import __version__

    typer.echo(f"ansi-mh10 version {__version__}")


if __name__ == "__main__":
    app()
