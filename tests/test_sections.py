"""Tests for section splitting and package header extraction."""

import time

import pytest

from gomark.parser import HeaderError, parse_package_header, split_sections
from gomark.parser.sections import is_section_header


class TestSectionHeader:
    """Test the ALL-CAPS header predicate."""

    @pytest.mark.parametrize("line", ["TYPES", "FUNCTIONS", "  CONSTANTS  ", "A"])
    def test_uppercase_letters_are_headers(self, line):
        assert is_section_header(line)

    @pytest.mark.parametrize(
        "line", ["", "   ", "Types", "Types2", "TYPES2", "TYPE S", "TYPES:", "ÄB1"]
    )
    def test_other_lines_are_not_headers(self, line):
        assert not is_section_header(line)


class TestSplitSections:
    """Test partitioning raw text into sections."""

    def test_preamble_goes_to_docs(self):
        sections = split_sections("package demo\n\nDemo docs.\n")
        assert sections == {"docs": "package demo\n\nDemo docs.\n\n"}

    def test_headers_are_lowercased_and_not_emitted(self):
        raw = "package demo\nFUNCTIONS\nfunc A()\nTYPES\ntype T int"
        sections = split_sections(raw)

        assert sections["docs"] == "package demo\n"
        assert sections["functions"] == "func A()\n"
        assert sections["types"] == "type T int\n"

    def test_lines_keep_their_indentation(self):
        raw = "package demo\nFUNCTIONS\nfunc A()\n    A docs.\n\tx"
        assert split_sections(raw)["functions"] == "func A()\n    A docs.\n\tx\n"

    def test_mixed_case_line_stays_in_body(self):
        raw = "package demo\nTYPES\nTypes2\ntype T int"
        assert split_sections(raw)["types"] == "Types2\ntype T int\n"

    def test_repeated_header_appends_to_same_section(self):
        raw = "package demo\nTYPES\na\nFUNCTIONS\nb\nTYPES\nc"
        assert split_sections(raw)["types"] == "a\nc\n"

    def test_missing_sections_are_absent(self):
        sections = split_sections("package demo\n")
        assert "functions" not in sections
        assert "types" not in sections

    def test_large_listing_splits_in_linear_time(self):
        body = "".join(f"func F{i}()\n    F{i} docs.\n" for i in range(40_000))
        raw = "package big\n\nFUNCTIONS\n" + body + "TYPES\ntype T int\n"

        start_time = time.time()
        sections = split_sections(raw)
        duration = time.time() - start_time

        assert sections["functions"] == body
        assert sections["types"] == "type T int\n\n"
        assert duration < 2.0, f"Splitting took {duration:.2f}s"

    def test_sample_sections(self, sample_listing):
        sections = split_sections(sample_listing)
        assert set(sections) == {"docs", "constants", "variables", "functions", "types"}


class TestPackageHeader:
    """Test package name and doc extraction."""

    def test_name_and_doc(self):
        preamble = 'package demo // import "example.com/demo"\n\nFirst line.\nSecond.\n\n'
        name, doc = parse_package_header(preamble)
        assert name == "demo"
        assert doc == "First line.\nSecond."

    def test_no_doc(self):
        assert parse_package_header("package demo\n") == ("demo", "")

    def test_empty_preamble_fails(self):
        with pytest.raises(HeaderError):
            parse_package_header("\n")

    def test_single_token_fails(self):
        with pytest.raises(HeaderError) as exc_info:
            parse_package_header("package\n\nDocs.\n")
        assert exc_info.value.recovery_hint

    def test_single_line_fails(self):
        with pytest.raises(HeaderError):
            parse_package_header("package demo")
