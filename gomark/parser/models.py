"""Data models for a parsed ``go doc`` listing.

This module defines the declaration model produced by the listing parser:
the package root and the functions, variables, blocks, types, structs and
interfaces it owns, plus the tagged reference used to route documentation
lines to whichever entity was opened last.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum

DOC_INDENT = "    "


def _strip_indent(line: str, indent: str = DOC_INDENT) -> str:
    if line.startswith(indent):
        return line[len(indent) :]
    return line


class _Documentable:
    """Mixin for entities that accumulate documentation lines."""

    doc: str

    def add_to_docs(self, line: str, indent: str = DOC_INDENT) -> None:
        """Append one documentation line, without its indent, to ``doc``."""
        self.doc += _strip_indent(line, indent) + "\n"


@dataclass
class Function(_Documentable):
    """A free function or a method owned by a struct or type."""

    name: str = ""
    doc: str = ""
    definition: str = ""


@dataclass
class Variable(_Documentable):
    """One constant or variable declaration, or an interface method signature."""

    name: str = ""
    doc: str = ""
    definition: str = ""
    value: str = ""
    type: str = ""


@dataclass
class VariableBlock(_Documentable):
    """A parenthesized ``var (...)`` or ``const (...)`` group."""

    variables: list[Variable] = field(default_factory=list)
    doc: str = ""


@dataclass
class Type(_Documentable):
    """A named non-struct, non-interface type and its methods."""

    doc: str = ""
    name: str = ""
    definition: str = ""
    functions: list[Function] = field(default_factory=list)


@dataclass
class Struct(_Documentable):
    """A struct type with its multi-line definition and methods."""

    doc: str = ""
    name: str = ""
    definition: str = ""
    functions: list[Function] = field(default_factory=list)


@dataclass
class Interface(_Documentable):
    """An interface type with its method signatures."""

    doc: str = ""
    name: str = ""
    definition: str = ""
    values: list[Variable] = field(default_factory=list)


Documentable = Function | Variable | VariableBlock | Type | Struct | Interface


class EntityKind(Enum):
    """Kinds of entity a documentation line can be routed to."""

    VARIABLE = "variable"
    VARIABLE_BLOCK = "variable_block"
    CONSTANT = "constant"
    CONSTANT_BLOCK = "constant_block"
    FUNCTION = "function"
    TYPE = "type"
    STRUCT = "struct"
    INTERFACE = "interface"
    TYPE_METHOD = "type_method"
    STRUCT_METHOD = "struct_method"


@dataclass(frozen=True)
class EntityRef:
    """Reference to one entity inside a Package.

    ``index`` points into the list selected by ``kind``. For methods,
    ``owner`` is the index of the owning type or struct and ``index`` points
    into that owner's ``functions``.
    """

    kind: EntityKind
    index: int
    owner: int | None = None


@dataclass
class Package:
    """Root of the declaration model for one parsed listing."""

    name: str = ""
    doc: str = ""
    variables: list[Variable] = field(default_factory=list)
    variable_blocks: list[VariableBlock] = field(default_factory=list)
    constants: list[Variable] = field(default_factory=list)
    constant_blocks: list[VariableBlock] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    types: list[Type] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    interfaces: list[Interface] = field(default_factory=list)

    def _sequence(self, kind: EntityKind, owner: int | None) -> list:
        if kind is EntityKind.TYPE_METHOD:
            return self.types[owner].functions  # type: ignore[index]
        if kind is EntityKind.STRUCT_METHOD:
            return self.structs[owner].functions  # type: ignore[index]
        return {
            EntityKind.VARIABLE: self.variables,
            EntityKind.VARIABLE_BLOCK: self.variable_blocks,
            EntityKind.CONSTANT: self.constants,
            EntityKind.CONSTANT_BLOCK: self.constant_blocks,
            EntityKind.FUNCTION: self.functions,
            EntityKind.TYPE: self.types,
            EntityKind.STRUCT: self.structs,
            EntityKind.INTERFACE: self.interfaces,
        }[kind]

    def append(self, kind: EntityKind, entity, owner: int | None = None) -> EntityRef:
        """Append ``entity`` to the list selected by ``kind`` and reference it."""
        sequence = self._sequence(kind, owner)
        sequence.append(entity)
        return EntityRef(kind, len(sequence) - 1, owner)

    def resolve(self, ref: EntityRef) -> Documentable:
        """Return the entity ``ref`` points to."""
        return self._sequence(ref.kind, ref.owner)[ref.index]

    def add_to_docs(
        self, ref: EntityRef | None, line: str, indent: str = DOC_INDENT
    ) -> bool:
        """Route a documentation line to the referenced entity.

        Returns:
            False when there is no entity in focus and the line was dropped.
        """
        if ref is None:
            return False
        self.resolve(ref).add_to_docs(line, indent)
        return True

    def last_variable(self) -> Variable | None:
        return self.variables[-1] if self.variables else None

    def last_variable_block(self) -> VariableBlock | None:
        return self.variable_blocks[-1] if self.variable_blocks else None

    def last_constant(self) -> Variable | None:
        return self.constants[-1] if self.constants else None

    def last_constant_block(self) -> VariableBlock | None:
        return self.constant_blocks[-1] if self.constant_blocks else None

    def last_function(self) -> Function | None:
        return self.functions[-1] if self.functions else None

    def last_type(self) -> Type | None:
        return self.types[-1] if self.types else None

    def last_struct(self) -> Struct | None:
        return self.structs[-1] if self.structs else None

    def last_interface(self) -> Interface | None:
        return self.interfaces[-1] if self.interfaces else None

    def to_dict(self) -> dict:
        """Convert the model to plain JSON-serializable data."""
        return asdict(self)
