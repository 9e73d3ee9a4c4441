"""
gomark Parser Module.

This module provides the public API for parsing ``go doc -all`` listings.
"""

from ..utils.errors import HeaderError, ParserStateError, ParsingError
from .grammar import get_function_name, parse_variable
from .listing_parser import ListingParser, parse_listing
from .models import (
    EntityKind,
    EntityRef,
    Function,
    Interface,
    Package,
    Struct,
    Type,
    Variable,
    VariableBlock,
)
from .sections import is_section_header, parse_package_header, split_sections
from .types import OwnerKind, TypeSectionParser, TypeState
from .values import ValueKind

__all__ = [
    "parse_listing",
    "ListingParser",
    "Package",
    "Function",
    "Variable",
    "VariableBlock",
    "Type",
    "Struct",
    "Interface",
    "EntityKind",
    "EntityRef",
    "split_sections",
    "is_section_header",
    "parse_package_header",
    "parse_variable",
    "get_function_name",
    "TypeSectionParser",
    "TypeState",
    "OwnerKind",
    "ValueKind",
    "ParsingError",
    "HeaderError",
    "ParserStateError",
]
