"""gomark: Markdown documentation from 'go doc -all' listings."""

from gomark.parser import Package, parse_listing

__version__ = "0.1.0"

__all__ = ["Package", "parse_listing", "__version__"]
