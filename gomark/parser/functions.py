"""Parser for the FUNCTIONS section of a listing."""

import logging

from .grammar import get_function_name, is_free_function
from .models import DOC_INDENT, EntityKind, EntityRef, Function, Package

logger = logging.getLogger(__name__)


def parse_functions(package: Package, text: str, indent: str = DOC_INDENT) -> None:
    """Populate ``package.functions`` from the FUNCTIONS section.

    Every free function declaration starts a new entry; any other non-empty
    line is documentation for the function started last.

    Args:
        package: Model to populate
        text: Text of the ``"functions"`` section
        indent: Documentation indent stripped from doc lines
    """
    focus: EntityRef | None = None
    for line in text.split("\n"):
        if is_free_function(line):
            function = Function(
                name=get_function_name(line) or "",
                definition=line.strip(),
            )
            focus = package.append(EntityKind.FUNCTION, function)
        elif line != "":
            if not package.add_to_docs(focus, line, indent):
                logger.debug("Dropping line before first function: %r", line)

    logger.debug("Parsed %d functions", len(package.functions))
