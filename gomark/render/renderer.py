"""
Markdown renderer for parsed packages.

Renders a Package model through a Jinja2 template. Templates reach helper
functions through the filter registry, which callers can extend.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError

from ..parser.models import Package
from ..utils.errors import TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "default.md.j2"


def anchor(name: str) -> str:
    """Convert a heading to a Markdown anchor slug."""
    slug = re.sub(r"[^\w\- ]", "", name.strip().lower())
    return slug.replace(" ", "-")


def code_block(text: str, language: str = "go") -> str:
    """Wrap text in a fenced code block."""
    return f"```{language}\n{text.rstrip()}\n```"


def doc_text(doc: str) -> str:
    """Trim a documentation string for display."""
    return doc.strip()


DEFAULT_FILTERS: dict[str, Callable[..., Any]] = {
    "anchor": anchor,
    "code_block": code_block,
    "doc_text": doc_text,
}


class MarkdownRenderer:
    """Renders packages to Markdown through a Jinja2 template."""

    def __init__(
        self,
        template_dir: Path | str | None = None,
        template_name: str = DEFAULT_TEMPLATE,
        filters: dict[str, Callable[..., Any]] | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            template_dir: Directory containing templates; the bundled
                templates are used when omitted
            template_name: Template file name inside ``template_dir``
            filters: Extra template filters, overriding the defaults by name
        """
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters.update(DEFAULT_FILTERS)
        if filters:
            self.env.filters.update(filters)

    def register_filter(self, name: str, function: Callable[..., Any]) -> None:
        """Add or replace a template filter."""
        self.env.filters[name] = function

    def render(self, package: Package) -> str:
        """Render the package.

        Raises:
            TemplateRenderError: If the template cannot be loaded or rendered
        """
        try:
            template = self.env.get_template(self.template_name)
            return template.render(package=package)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render template {self.template_name}: {e}",
                recovery_hint=f"Check templates in {self.template_dir}",
            ) from e


def render_package(package: Package, **kwargs: Any) -> str:
    """Render a package with a one-off MarkdownRenderer."""
    return MarkdownRenderer(**kwargs).render(package)
