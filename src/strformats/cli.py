"""strformats command-line interface.

Commands:
    formats    List registered formats
    types      List format types and the names registered for them
    normalize  Show the normalized name of a format
    validate   Check a value against a format
    parse      Parse a value and print its canonical text

Usage:
    $ strformats formats
    $ strformats validate date-time 2012-03-02T15:06:05Z
    $ strformats parse duration "3 days"
"""

from __future__ import annotations

import logging
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from strformats.core.errors import FormatError
from strformats.core.registry import FormatRegistry
from strformats.formats import new_formats

app = typer.Typer(
    help="Inspect and check named string formats.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _registry() -> FormatRegistry:
    """Registry used by every command; a private copy of the built-ins."""
    return new_formats()


def _error(message: str) -> NoReturn:
    """Print error and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Inspect and check named string formats."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


@app.command()
def formats() -> None:
    """List registered formats."""
    registry = _registry()
    table = Table(title="String Formats")
    table.add_column("Name", style="green")
    table.add_column("Registered As")
    table.add_column("Type", style="cyan")
    table.add_column("Zero Value")

    for entry in registry:
        table.add_row(entry.name, entry.original_name, entry.type_name, escape(entry.zero()))

    console.print(table)
    console.print(f"\n{len(registry)} formats registered")


@app.command()
def types() -> None:
    """List format types and the format names registered for them."""
    table = Table(title="Format Types")
    table.add_column("Type", style="cyan")
    table.add_column("Formats", style="green")

    for type_name, names in _registry().type_to_formats().items():
        table.add_row(type_name, ", ".join(names))

    console.print(table)


@app.command()
def normalize(name: Annotated[str, typer.Argument(help="Format name, e.g. date-time.")]) -> None:
    """Show the normalized name of a registered format."""
    normalized = _registry().normalized(name)
    if not normalized:
        _error(f"Unknown format: {name}")
    typer.echo(normalized)


@app.command()
def validate(
    name: Annotated[str, typer.Argument(help="Format name.")],
    value: Annotated[str, typer.Argument(help="Value to check.")],
) -> None:
    """Check a value against a format (exit code 1 when invalid)."""
    registry = _registry()
    if not registry.contains_name(name):
        _error(f"Unknown format: {name}")
    if registry.validates(name, value):
        console.print(f"[green]valid[/green] {escape(name)}")
        return
    console.print(f"[red]invalid[/red] {escape(name)}")
    raise typer.Exit(code=1)


@app.command()
def parse(
    name: Annotated[str, typer.Argument(help="Format name.")],
    value: Annotated[str, typer.Argument(help="Value to parse.")],
) -> None:
    """Parse a value and print its type and canonical text."""
    try:
        parsed = _registry().parse(name, value)
    except FormatError as e:
        _error(str(e))
    typer.echo(f"Type:  {type(parsed).__name__}")
    typer.echo(f"Value: {parsed.to_text()}")
