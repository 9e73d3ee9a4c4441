"""Parser for the VARIABLES and CONSTANTS sections of a listing."""

import logging
from enum import Enum

from .grammar import parse_variable
from .models import DOC_INDENT, EntityKind, EntityRef, Package, VariableBlock

logger = logging.getLogger(__name__)

BLOCK_CLOSER = ")"


class ValueKind(Enum):
    """Which declaration keyword a value section holds."""

    VAR = "var"
    CONST = "const"

    @property
    def section(self) -> str:
        return "variables" if self is ValueKind.VAR else "constants"

    @property
    def flat_kind(self) -> EntityKind:
        return EntityKind.VARIABLE if self is ValueKind.VAR else EntityKind.CONSTANT

    @property
    def block_kind(self) -> EntityKind:
        if self is ValueKind.VAR:
            return EntityKind.VARIABLE_BLOCK
        return EntityKind.CONSTANT_BLOCK


def parse_values(
    package: Package, text: str, kind: ValueKind, indent: str = DOC_INDENT
) -> None:
    """Populate top-level and grouped declarations of one kind.

    Writes ``package.variables``/``variable_blocks`` for ``ValueKind.VAR``
    and ``package.constants``/``constant_blocks`` for ``ValueKind.CONST``.

    Documentation lines go to the entity opened last. Inside a block that
    is always the block itself, so the docs of every member collapse into
    the block's single ``doc``.

    Args:
        package: Model to populate
        text: Text of the matching section
        kind: Keyword the section declares
        indent: Documentation indent
    """
    keyword = kind.value
    block_opener = f"{keyword} ("
    focus: EntityRef | None = None
    block: VariableBlock | None = None

    for line in text.split("\n"):
        if line.startswith(indent):
            package.add_to_docs(focus, line, indent)
            continue

        if line.startswith(block_opener):
            block = VariableBlock()
            focus = package.append(kind.block_kind, block)
            continue

        if line.rstrip() == BLOCK_CLOSER:
            block = None
            continue

        if block is not None:
            block.variables.append(parse_variable(line))
        elif line.strip().startswith(keyword):
            focus = package.append(kind.flat_kind, parse_variable(line))
        elif line.strip():
            logger.debug("Ignoring unrecognized %s line: %r", kind.section, line)
