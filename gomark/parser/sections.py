"""Section splitting and package header extraction.

``go doc -all`` output is a preamble (the package clause and package doc)
followed by sections introduced by ALL-CAPS header lines such as
``CONSTANTS``, ``VARIABLES``, ``FUNCTIONS`` and ``TYPES``.
"""

import logging

from ..utils.errors import HeaderError

logger = logging.getLogger(__name__)

PREAMBLE_SECTION = "docs"


def is_section_header(line: str) -> bool:
    """Return True if the trimmed line consists only of uppercase letters."""
    trimmed = line.strip()
    if not trimmed:
        return False
    return all(char.isalpha() and char.isupper() for char in trimmed)


def split_sections(raw: str) -> dict[str, str]:
    """Partition raw listing text into named sections.

    Args:
        raw: Complete ``go doc -all`` output

    Returns:
        Mapping of lowercased section name to the text of the lines under
        that header, each line terminated by a newline. Lines before the
        first header are stored under ``"docs"``.
    """
    lines_by_section: dict[str, list[str]] = {}
    current = PREAMBLE_SECTION
    for line in raw.split("\n"):
        if is_section_header(line):
            current = line.strip().lower()
            logger.debug("Entering section %r", current)
            continue
        lines_by_section.setdefault(current, []).append(line + "\n")
    return {name: "".join(lines) for name, lines in lines_by_section.items()}


def parse_package_header(preamble: str) -> tuple[str, str]:
    """Read the package name and package doc from the preamble section.

    The first line is the package clause (``package name // import "..."``);
    the package doc starts on the third line.

    Args:
        preamble: Text of the ``"docs"`` section

    Returns:
        Tuple of (package name, package doc)

    Raises:
        HeaderError: If the preamble is too short to hold a package clause
    """
    lines = preamble.split("\n")
    if len(lines) < 2:
        raise HeaderError(
            "Listing preamble has fewer than two lines",
            recovery_hint="Pass the complete output of 'go doc -all'",
        )
    fields = lines[0].split()
    if len(fields) < 2:
        raise HeaderError(
            f"Cannot read a package name from {lines[0]!r}",
            recovery_hint="The listing must start with 'package <name>'",
        )
    return fields[1], "\n".join(lines[2:]).strip()
