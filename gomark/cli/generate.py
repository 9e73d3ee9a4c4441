"""
Generate command for the gomark CLI.

Runs ``go doc -all`` for a package, parses the listing and renders the
result to Markdown.
"""

import time
from pathlib import Path
from typing import Annotated, Optional

import typer

from gomark.cli.console import get_console
from gomark.godoc import get_go_doc
from gomark.parser import ParsingError, parse_listing
from gomark.render import MarkdownRenderer
from gomark.utils.config import GomarkConfig


def generate(
    ctx: typer.Context,
    path: Annotated[
        str, typer.Option("--path", "-p", help="Path of the Go package to document")
    ] = ".",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write Markdown to this file"),
    ] = None,
    template: Annotated[
        Optional[Path],
        typer.Option("--template", "-t", help="Custom Jinja2 template file"),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Print unstyled output only, no status line"),
    ] = False,
) -> None:
    """
    Generate Markdown documentation for a Go package.
    """
    console = get_console()
    config: GomarkConfig = (ctx.obj or {}).get("config") or GomarkConfig()
    started_at = time.perf_counter()

    try:
        listing = get_go_doc(path, config.godoc)
        package = parse_listing(listing, config.parser)

        if template is not None:
            renderer = MarkdownRenderer(template.parent, template.name)
        else:
            renderer = MarkdownRenderer(
                config.render.template_dir, config.render.template_name
            )
        document = renderer.render(package)

        if output is not None:
            output.write_text(document, encoding="utf-8")
        else:
            typer.echo(document)

        if not raw:
            elapsed = time.perf_counter() - started_at
            console.print(
                f"[green]Successfully generated docs for[/green] "
                f"[magenta]{package.name}[/magenta] [dim]({elapsed:.3f}s)[/dim]"
            )
    except ParsingError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        if e.recovery_hint:
            console.print(f"[yellow]Hint:[/yellow] {e.recovery_hint}")
        raise typer.Exit(1) from None
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
