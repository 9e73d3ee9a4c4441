"""Markdown rendering of parsed packages."""

from .renderer import DEFAULT_FILTERS, MarkdownRenderer, render_package

__all__ = ["DEFAULT_FILTERS", "MarkdownRenderer", "render_package"]
