"""Listing parser combining the section parsers.

This module provides the ListingParser class that runs every section parser
over one ``go doc -all`` listing in a fixed order and returns the populated
Package model.
"""

import logging

from ..utils.config import ParserConfig
from ..utils.errors import ParserStateError
from .functions import parse_functions
from .models import Package
from .sections import PREAMBLE_SECTION, parse_package_header, split_sections
from .types import TypeSectionParser
from .values import ValueKind, parse_values

logger = logging.getLogger(__name__)


class ListingParser:
    """Parses one raw listing into a fresh Package model."""

    def __init__(self, raw: str, config: ParserConfig | None = None) -> None:
        self.raw = raw
        self.config = config or ParserConfig()
        self.sections: dict[str, str] = {}
        self.package = Package()
        self._parsed = False

    def parse(self) -> Package:
        """Parse the listing.

        Steps:
        1. Split the raw text into sections
        2. Read package name and doc from the preamble
        3. Parse free functions
        4. Parse variables, then constants
        5. Parse types, structs, interfaces and their methods

        Returns:
            The populated Package

        Raises:
            HeaderError: If the preamble has no package clause
            ParserStateError: If this parser already ran
        """
        if self._parsed:
            raise ParserStateError(
                "ListingParser.parse() was already called on this instance",
                recovery_hint="Create a new ListingParser for every parse",
            )
        self._parsed = True
        indent = self.config.indent

        self.sections = split_sections(self.raw)
        self.package.name, self.package.doc = parse_package_header(
            self.sections.get(PREAMBLE_SECTION, "")
        )
        logger.debug("Parsing listing for package %s", self.package.name)

        parse_functions(self.package, self.sections.get("functions", ""), indent)
        for kind in (ValueKind.VAR, ValueKind.CONST):
            parse_values(
                self.package, self.sections.get(kind.section, ""), kind, indent
            )
        TypeSectionParser(self.package, indent).parse(self.sections.get("types", ""))
        return self.package


def parse_listing(raw: str, config: ParserConfig | None = None) -> Package:
    """Parse raw ``go doc -all`` output into a Package model.

    Args:
        raw: Complete listing text
        config: Optional parser configuration

    Returns:
        A new, fully populated Package
    """
    return ListingParser(raw, config).parse()
