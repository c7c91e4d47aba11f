"""CLI entry point for contextbook.

Invoked as::

    contextbook [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m contextbook.cli.main

Commands
--------
parse       Parse one command line and show the resulting command
check       Parse every line of a command script and report failures
run         Execute a command script against an empty contact list
version     Show version information

Command scripts hold one command line per line; blank lines and lines
starting with ``#`` are skipped.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from contextbook.commands.base import Command
    from contextbook.contact.nodes import Contact

console = Console()
err_console = Console(stderr=True)


def _read_script(path: str) -> list[tuple[int, str]]:
    """Read a command script, exiting on error.

    Returns ``(line_number, text)`` pairs for every command line.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    return [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip() and not line.lstrip().startswith("#")
    ]


def _contacts_table(contacts: "tuple[Contact, ...]", title: str) -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("#", justify="right", min_width=3)
    table.add_column("Name", style="bold")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Note")
    table.add_column("Tags")
    for position, contact in enumerate(contacts, start=1):
        table.add_row(
            str(position),
            escape(contact.name.value),
            contact.phone.value,
            escape(contact.email.value),
            escape(contact.note.value),
            escape(", ".join(t.name for t in contact.sorted_tags)),
        )
    return table


def _command_table(command: "Command") -> Table:
    table = Table(show_header=False, box=None)
    table.add_row("[bold]command[/bold]", type(command).__name__)
    if is_dataclass(command):
        for f in fields(command):
            table.add_row(f"[bold]{f.name}[/bold]", escape(str(getattr(command, f.name))))
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="contextbook")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (default: WARNING).",
)
def cli(log_level: str) -> None:
    """Contact management core: command parser, validators and model."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from contextbook import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]contextbook[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("line", nargs=-1, required=True)
def parse_command(line: tuple[str, ...]) -> None:
    """Parse a single command line and show the resulting command.

    LINE is the command line; quote it or pass it as separate words.

    Examples:

    \b
        contextbook parse add n/Alice p/98765432 e/alice@example.com t/friend
        contextbook parse "edit 2 t/"
    """
    from contextbook.formatter import format_command
    from contextbook.parser import ParseError, parse_input

    try:
        command = parse_input(" ".join(line))
    except ParseError as exc:
        err_console.print(f"[red]Parse error:[/red] {escape(str(exc))}")
        sys.exit(1)

    console.print(_command_table(command))
    console.print(f"\n[bold]canonical:[/bold] {escape(format_command(command))}")


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
def check_command(file: str) -> None:
    """Parse every line of a command script without executing it.

    FILE is the path to the command script to check.
    """
    from contextbook.parser import ParseError, parse_input

    lines = _read_script(file)
    failures: list[tuple[int, str, ParseError]] = []
    for number, text in lines:
        try:
            parse_input(text)
        except ParseError as exc:
            failures.append((number, text, exc))

    if not failures:
        console.print(f"[green]OK[/green] {file}: {len(lines)} command(s) parsed")
        sys.exit(0)

    table = Table(title=f"Check: {file}", show_lines=True)
    table.add_column("Line", justify="right", min_width=4)
    table.add_column("Error", style="bold", min_width=12)
    table.add_column("Input")
    table.add_column("Message")
    for number, text, exc in failures:
        table.add_row(
            str(number),
            f"[red]{type(exc).__name__}[/red]",
            escape(text),
            escape(str(exc)),
        )

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(failures)} of {len(lines)} line(s) failed")
    sys.exit(1)


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


@cli.command(name="run")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="How to print the final contact view",
)
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress per-command feedback")
def run_command(file: str, output_format: str, quiet: bool) -> None:
    """Execute a command script against an empty contact list.

    FILE is the path to the command script. Execution stops at the first
    failing line; the contact view at that point is still printed.
    """
    from contextbook.commands.base import CommandError
    from contextbook.contact.serializer import ContactSerializer
    from contextbook.convenience import ContactBook
    from contextbook.parser import ParseError

    book = ContactBook()
    failed = False
    for number, text in _read_script(file):
        try:
            result = book.execute(text)
        except (ParseError, CommandError) as exc:
            err_console.print(f"[red]Error[/red] at line {number}: {escape(text)}\n  {escape(str(exc))}")
            failed = True
            break
        if not quiet:
            console.print(f"[dim]{number}:[/dim] {escape(result.feedback_to_user)}")
        if result.exit:
            break

    shown = book.shown
    if output_format == "table":
        console.print(_contacts_table(shown, title=f"Contacts ({len(shown)} shown)"))
    elif output_format == "json":
        click.echo(ContactSerializer().to_json(shown))
    else:
        click.echo(ContactSerializer().to_yaml(shown), nl=False)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
