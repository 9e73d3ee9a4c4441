"""
Allow gomark to be invoked as a module.

This enables running the CLI with:
    python -m gomark
"""

from gomark.cli.main import run

if __name__ == "__main__":
    run()
