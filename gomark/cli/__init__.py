"""
gomark CLI package.

This package contains the command-line interface for gomark,
organized into one submodule per command.
"""

from gomark.cli.main import app

__all__ = ["app"]
