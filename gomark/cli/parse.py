"""
Parse command for the gomark CLI.

This module contains the parse command which reads an existing
``go doc -all`` listing and displays the declarations found in it.
"""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from gomark.cli.console import get_console
from gomark.parser import Package, ParsingError, parse_listing
from gomark.utils.config import GomarkConfig


def _summary_rows(package: Package) -> list[tuple[str, str, str, str]]:
    """Flatten a package into (kind, name, owner, doc preview) rows."""
    rows: list[tuple[str, str, str, str]] = []

    def preview(doc: str) -> str:
        first = doc.strip().split("\n")[0]
        return first[:37] + "..." if len(first) > 40 else first

    for constant in package.constants:
        rows.append(("const", constant.name, "", preview(constant.doc)))
    for block in package.constant_blocks:
        names = ", ".join(v.name for v in block.variables if v.name)
        rows.append(("const block", names, "", preview(block.doc)))
    for variable in package.variables:
        rows.append(("var", variable.name, "", preview(variable.doc)))
    for block in package.variable_blocks:
        names = ", ".join(v.name for v in block.variables if v.name)
        rows.append(("var block", names, "", preview(block.doc)))
    for function in package.functions:
        rows.append(("func", function.name, "", preview(function.doc)))
    for type_ in package.types:
        rows.append(("type", type_.name, "", preview(type_.doc)))
        for method in type_.functions:
            rows.append(("method", method.name, type_.name, preview(method.doc)))
    for struct in package.structs:
        rows.append(("struct", struct.name, "", preview(struct.doc)))
        for method in struct.functions:
            rows.append(("method", method.name, struct.name, preview(method.doc)))
    for interface in package.interfaces:
        rows.append(("interface", interface.name, "", preview(interface.doc)))
    return rows


def parse(
    ctx: typer.Context,
    listing: Annotated[
        str,
        typer.Argument(help="File holding 'go doc -all' output, or '-' for stdin"),
    ] = "-",
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON instead of a table"),
    ] = False,
) -> None:
    """
    Parse a saved 'go doc -all' listing and display its declarations.
    """
    console = get_console()
    config: GomarkConfig = (ctx.obj or {}).get("config") or GomarkConfig()

    try:
        if listing == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(listing).read_text(encoding="utf-8")
        package = parse_listing(raw, config.parser)
    except ParsingError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        if e.recovery_hint:
            console.print(f"[yellow]Hint:[/yellow] {e.recovery_hint}")
        raise typer.Exit(1) from None
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {listing}: {e}")
        raise typer.Exit(1) from None

    if json_output:
        typer.echo(json.dumps(package.to_dict(), indent=2))
        return

    rows = _summary_rows(package)
    if not rows:
        console.print(f"[yellow]No declarations found in {package.name}.[/yellow]")
        return

    table = Table(title=f"Declarations in package {package.name}")
    table.add_column("Kind", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Receiver", style="blue")
    table.add_column("Doc", style="white", max_width=40)
    for row in rows:
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[green]Found {len(rows)} declarations[/green]")
