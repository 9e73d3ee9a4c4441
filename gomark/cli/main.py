"""
Main entry point for the gomark CLI application.

This module sets up the Typer application and registers all commands
from the various submodules.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import click
import typer
from dotenv import load_dotenv

from gomark import __version__
from gomark.cli import console as console_module
from gomark.cli.generate import generate
from gomark.cli.parse import parse
from gomark.utils.config import GomarkConfig
from gomark.utils.errors import ConfigError

app = typer.Typer(help="gomark: generate Markdown documentation for Go packages.")


def version_callback(value: bool) -> None:
    """Prints the version of the application and exits."""
    if value:
        print(f"gomark v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show the application's version and exit.",
        ),
    ] = False,
    debug: Annotated[
        bool, typer.Option("--debug", "-d", help="Enable debug messages")
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output", envvar="NO_COLOR"),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Use plain text output (no Unicode or colors)"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML configuration file"),
    ] = None,
) -> None:
    """
    Generate Markdown documentation from 'go doc -all' output.
    """
    load_dotenv()
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    console = console_module.configure(plain=plain or no_color)

    config = GomarkConfig()
    if config_path is not None:
        try:
            config = GomarkConfig.from_yaml(config_path)
        except ConfigError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            if e.recovery_hint:
                console.print(f"[yellow]Hint:[/yellow] {e.recovery_hint}")
            raise typer.Exit(1) from None

    ctx.obj = {"console": console, "config": config}


app.command("generate")(generate)
app.command("parse")(parse)


def run() -> None:
    """Console script entry point.

    Runs the app outside Click's standalone mode so that an interrupt is
    reported as a warning and exits cleanly instead of with code 130.
    """
    try:
        result = app(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        console_module.get_console().print("[yellow]Warning:[/yellow] user interrupt")
        raise SystemExit(0) from None
    except click.exceptions.ClickException as e:
        e.show()
        raise SystemExit(e.exit_code) from None
    raise SystemExit(result if isinstance(result, int) else 0)


if __name__ == "__main__":
    run()
