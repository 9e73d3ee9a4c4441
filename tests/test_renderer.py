"""Tests for Markdown rendering."""

import pytest

from gomark.parser import Function, Package
from gomark.render import DEFAULT_FILTERS, MarkdownRenderer, render_package
from gomark.render.renderer import anchor, code_block
from gomark.utils.errors import TemplateRenderError


class TestFilters:
    """Test the default template filters."""

    def test_anchor(self):
        assert anchor("SimpleStruct1") == "simplestruct1"
        assert anchor("type Foo.Bar") == "type-foobar"

    def test_code_block(self):
        assert code_block("func Foo()\n") == "```go\nfunc Foo()\n```"
        assert code_block("x", "text") == "```text\nx\n```"

    def test_registry_names(self):
        assert set(DEFAULT_FILTERS) == {"anchor", "code_block", "doc_text"}


class TestMarkdownRenderer:
    """Test rendering with the bundled and custom templates."""

    def test_sample_document(self, sample_package):
        document = render_package(sample_package)

        assert document.startswith("# experimenting\n")
        assert "Package experimenting is an experimenting package." in document
        assert "## Constants" in document
        assert "## Variables" in document
        assert "### AcceptsAString" in document
        assert "```go\nfunc AcceptsAString(input string)\n```" in document
        assert "### SimpleStruct1" in document
        assert "#### SimpleStruct1.SS1F1" in document
        assert "#### SimpleStruct2.SS2F2" in document
        assert "### SimpleInterface2" in document
        assert "### TypeString" in document

    def test_empty_sections_are_omitted(self):
        package = Package(
            name="demo",
            functions=[Function(name="Foo", doc="Foo docs.\n", definition="func Foo()")],
        )
        document = MarkdownRenderer().render(package)

        assert "## Functions" in document
        assert "## Types" not in document
        assert "## Constants" not in document
        assert "Foo docs." in document

    def test_custom_template_and_filter(self, tmp_path):
        (tmp_path / "short.md.j2").write_text(
            "{{ package.name | shout }}:{% for f in package.functions %} {{ f.name }}{% endfor %}"
        )
        renderer = MarkdownRenderer(
            tmp_path, "short.md.j2", filters={"shout": lambda s: s.upper()}
        )
        package = Package(name="demo", functions=[Function(name="Foo")])
        assert renderer.render(package) == "DEMO: Foo"

    def test_register_filter(self, tmp_path):
        (tmp_path / "t.j2").write_text("{{ package.name | twice }}")
        renderer = MarkdownRenderer(tmp_path, "t.j2")
        renderer.register_filter("twice", lambda s: s * 2)
        assert renderer.render(Package(name="ab")) == "abab"

    def test_missing_template(self, tmp_path):
        renderer = MarkdownRenderer(tmp_path, "missing.j2")
        with pytest.raises(TemplateRenderError):
            renderer.render(Package(name="demo"))
