"""State machine for the TYPES section of a listing.

The TYPES section interleaves type declarations with the variables and
methods that belong to them::

    type Foo struct {
        Name string
    }
        Foo docs.

    func (f Foo) Bar() string
        Bar docs.

Each line goes through two passes. ``continue_state`` finishes whatever the
previous line opened, then ``detect_opener`` checks whether the current line
opens something new. Methods attach to the struct or type opened last.
"""

import logging
from enum import Enum

from .grammar import get_function_name, is_method, parse_variable
from .models import (
    DOC_INDENT,
    EntityKind,
    EntityRef,
    Function,
    Interface,
    Package,
    Struct,
    Type,
)

logger = logging.getLogger(__name__)

TYPE_KEYWORD = "type "
VAR_KEYWORD = "var "
STRUCT_OPENER = "struct {"
INTERFACE_OPENER = "interface {"
BLOCK_CLOSER = "}"


class TypeState(Enum):
    """What the previous line opened."""

    NONE = "none"
    STRUCT = "struct"
    INTERFACE = "interface"
    VAR = "var"
    FUNC = "func"
    TYPE = "type"
    DOCS = "docs"


class OwnerKind(Enum):
    """Which declaration kind receives the next method."""

    NONE = "none"
    STRUCT = "struct"
    TYPE = "type"


class TypeSectionParser:
    """Reconstructs types, structs, interfaces and methods from TYPES text."""

    def __init__(self, package: Package, indent: str = DOC_INDENT) -> None:
        self.package = package
        self.indent = indent
        self.state = TypeState.NONE
        self.last_owner = OwnerKind.NONE
        self.focus: EntityRef | None = None
        self.pending_method: str | None = None

    def parse(self, text: str) -> None:
        """Feed every line of the section through the state machine."""
        for line in text.split("\n"):
            self.feed(line)
        logger.debug(
            "Parsed %d types, %d structs, %d interfaces",
            len(self.package.types),
            len(self.package.structs),
            len(self.package.interfaces),
        )

    def feed(self, line: str) -> None:
        """Process one line."""
        if line == BLOCK_CLOSER:
            self._close_block()
            return
        self.continue_state(line)
        self.detect_opener(line)

    def _close_block(self) -> None:
        if self.state is TypeState.STRUCT:
            self.package.structs[-1].definition += BLOCK_CLOSER
        elif self.state is TypeState.INTERFACE:
            self.package.interfaces[-1].definition += BLOCK_CLOSER
        else:
            logger.debug("Closing brace outside of a struct or interface")
        self.state = TypeState.NONE

    def continue_state(self, line: str) -> None:
        """Pass A: complete the declaration opened on a previous line."""
        if self.state is TypeState.STRUCT:
            self.package.structs[-1].definition += line + "\n"
        elif self.state is TypeState.INTERFACE:
            interface = self.package.interfaces[-1]
            interface.definition += line + "\n"
            interface.values.append(parse_variable(line.strip()))
        elif self.state is TypeState.VAR:
            self.focus = EntityRef(EntityKind.VARIABLE, len(self.package.variables) - 1)
            self.state = TypeState.NONE
        elif self.state is TypeState.FUNC:
            self.focus = self._attach_method()
            self.state = TypeState.NONE
        elif self.state is TypeState.TYPE:
            self.focus = EntityRef(EntityKind.TYPE, len(self.package.types) - 1)
            self.state = TypeState.NONE
        elif self.state is TypeState.DOCS:
            self.state = TypeState.NONE

    def detect_opener(self, line: str) -> None:
        """Pass B: open a new declaration or route a documentation line."""
        if line.startswith(TYPE_KEYWORD):
            self._open_type(line)
        elif line.startswith(VAR_KEYWORD):
            self.package.variables.append(parse_variable(line))
            self.state = TypeState.VAR
        elif is_method(line):
            self.pending_method = line
            self.state = TypeState.FUNC
        elif line.startswith(self.indent):
            self.package.add_to_docs(self.focus, line, self.indent)
            self.state = TypeState.DOCS
        elif line.strip() and self.state is TypeState.NONE:
            logger.debug("Ignoring unrecognized types line: %r", line)

    def _open_type(self, line: str) -> None:
        name = line.split(" ")[1]
        if STRUCT_OPENER in line:
            struct = Struct(name=name, definition=line + "\n")
            self.focus = self.package.append(EntityKind.STRUCT, struct)
            self.last_owner = OwnerKind.STRUCT
            self.state = TypeState.STRUCT
        elif INTERFACE_OPENER in line:
            interface = Interface(name=name, definition=line + "\n")
            self.focus = self.package.append(EntityKind.INTERFACE, interface)
            self.state = TypeState.INTERFACE
        else:
            self.package.types.append(Type(name=name, definition=line))
            self.last_owner = OwnerKind.TYPE
            self.state = TypeState.TYPE

    def _attach_method(self) -> EntityRef | None:
        """Create a method from the pending declaration on the last owner."""
        function = Function()
        if self.pending_method:
            function.name = get_function_name(self.pending_method) or ""
            function.definition = self.pending_method
        self.pending_method = None

        if self.last_owner is OwnerKind.STRUCT:
            owner = len(self.package.structs) - 1
            return self.package.append(EntityKind.STRUCT_METHOD, function, owner)
        if self.last_owner is OwnerKind.TYPE:
            owner = len(self.package.types) - 1
            return self.package.append(EntityKind.TYPE_METHOD, function, owner)

        logger.debug("Dropping method without owner: %r", function.definition)
        return None
