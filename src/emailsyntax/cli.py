"""
emailsyntax command line interface.

Commands:
- check: validate addresses given as arguments or on stdin
- tokens: show how an address is tokenized
"""

from __future__ import annotations

import json
import logging
import platform
import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_settings
from .core.errors import ConfigError
from .core.lexer import tokenize
from .core.result import ValidationResult
from .validator import EmailValidator

console = Console()

app = typer.Typer(
    help="RFC 5321/5322 email address syntax checker.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"emailsyntax {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log parser decisions to stderr")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )


def _printable(text: str) -> str:
    """Show control characters as escapes so table cells stay on one line."""
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)


def _read_addresses(addresses: list[str]) -> list[str]:
    """Expand ``-`` into the non-empty lines of stdin."""
    expanded: list[str] = []
    for address in addresses:
        if address == "-":
            expanded.extend(line.rstrip("\r\n") for line in sys.stdin if line.strip())
        else:
            expanded.append(address)
    return expanded


def _print_results(results: list[ValidationResult]) -> None:
    table = Table(title="Address check")
    table.add_column("Address")
    table.add_column("Valid")
    table.add_column("Reason / warnings")

    for result in results:
        if result.reason is not None:
            notes = f"[red]{result.reason.value}[/red]"
        elif result.rejected:
            notes = "[red]rejected: " + ", ".join(w.value for w in result.rejected) + "[/red]"
        else:
            notes = ", ".join(w.value for w in result.warnings)
        table.add_row(
            escape(_printable(result.address)),
            "[green]yes[/green]" if result.valid else "[red]no[/red]",
            notes,
        )

    console.print(table)
    invalid = sum(1 for result in results if not result.valid)
    console.print(f"\n[dim]{len(results)} address(es) checked, {invalid} invalid[/dim]")


@app.command()
def check(
    addresses: Annotated[
        list[str], typer.Argument(help="Addresses to check; '-' reads one per line from stdin")
    ],
    strict: Annotated[
        bool, typer.Option("--strict", help="Reject addresses that produce any warning")
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to emailsyntax.toml")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Validate email addresses. Exits with code 1 if any address is invalid."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if strict:
        settings = replace(settings, strict=True)

    validator = EmailValidator(settings)
    results = [validator.validate(address) for address in _read_addresses(addresses)]

    if output_json:
        typer.echo(json.dumps([result.model_dump(mode="json") for result in results], indent=2))
    else:
        _print_results(results)

    if not all(result.valid for result in results):
        raise typer.Exit(code=1)


@app.command()
def tokens(
    address: Annotated[str, typer.Argument(help="Address or address part to tokenize")],
) -> None:
    """Show the token stream of an address."""
    table = Table(title="Tokens")
    table.add_column("#", style="dim")
    table.add_column("Offset", style="dim")
    table.add_column("Type")
    table.add_column("Value")

    for index, token in enumerate(tokenize(address)):
        table.add_row(
            str(index),
            str(token.position),
            token.type.name,
            escape(_printable(token.value)),
        )

    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
