"""
Console configuration for the gomark CLI.

This module provides the shared Rich console used for status and error
messages. Rendered documents go to stdout unstyled.
"""

import os

from rich.console import Console


def create_console(plain: bool = False) -> Console:
    """Create a console for the current environment."""
    no_color = plain or bool(os.environ.get("NO_COLOR"))
    if plain:
        return Console(
            no_color=True,
            force_terminal=False,
            highlight=False,
            emoji=False,
            markup=True,
        )
    return Console(no_color=no_color, highlight=False, log_time_format="[%X]")


console = create_console()


def get_console() -> Console:
    """Return the console currently configured by the app callback."""
    return console


def configure(plain: bool) -> Console:
    """Replace the shared console."""
    global console
    console = create_console(plain=plain)
    return console
