"""
Schema node definitions for the GraphQL type graph.

These nodes represent the named types of a schema as handed to the
generator. They are read-only for the duration of a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Scalars every GraphQL schema knows, even when the graph omits them
BUILT_IN_SCALARS = ("ID", "String", "Boolean", "Int", "Float")


class TypeKind(str, Enum):
    """Kind of a named schema type."""

    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    INPUT_OBJECT = "inputObject"


@dataclass(frozen=True)
class TypeReference:
    """A reference to a type, possibly wrapped in lists.

    Exactly one of `named` (leaf) or `of_type` (list item) is set.
    `nullable` applies at this level only.
    """

    named: str | None = None
    of_type: TypeReference | None = None
    nullable: bool = True

    @staticmethod
    def to(name: str, nullable: bool = True) -> TypeReference:
        """Create a leaf reference to a named type."""
        return TypeReference(named=name, nullable=nullable)

    @staticmethod
    def list_of(item: TypeReference, nullable: bool = True) -> TypeReference:
        """Create a list reference around an item reference."""
        return TypeReference(of_type=item, nullable=nullable)

    @property
    def is_list(self) -> bool:
        return self.of_type is not None

    @property
    def leaf_name(self) -> str:
        """Name of the innermost named type."""
        ref = self
        while ref.of_type is not None:
            ref = ref.of_type
        return ref.named or ""


@dataclass(frozen=True)
class EnumValueDef:
    """One value of an enum type."""

    name: str = ""
    # Literal value; None means the value is the name itself
    value: str | None = None
    description: str | None = None

    @property
    def literal(self) -> str:
        return self.name if self.value is None else self.value


@dataclass(frozen=True)
class FieldDef:
    """A field of an object, interface or input object, or a field argument."""

    name: str = ""
    type_ref: TypeReference = TypeReference()

    # Arguments and input object fields are input positions
    is_input_position: bool = False
    description: str | None = None

    # Only output fields carry arguments
    arguments: tuple[FieldDef, ...] = ()

    # Only input positions can declare a default value
    has_default: bool = False


@dataclass(frozen=True)
class SchemaTypeDef:
    """One named schema type."""

    kind: TypeKind = TypeKind.SCALAR
    name: str = ""
    description: str | None = None

    # object, interface, inputObject
    fields: tuple[FieldDef, ...] = ()

    # enum
    values: tuple[EnumValueDef, ...] = ()

    # union member type names
    members: tuple[str, ...] = ()

    # interfaces implemented by an object or interface
    interfaces: tuple[str, ...] = ()


class SchemaGraph:
    """The named types of a schema, in source order."""

    def __init__(self, types: list[SchemaTypeDef] | tuple[SchemaTypeDef, ...] = ()):
        self._types = tuple(types)
        self._by_name = {type_def.name: type_def for type_def in self._types}

    def __iter__(self):
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> SchemaTypeDef | None:
        """Get a type definition by name."""
        return self._by_name.get(name)

    def of_kind(self, kind: TypeKind) -> list[SchemaTypeDef]:
        """All types of one kind, in source order."""
        return [type_def for type_def in self._types if type_def.kind == kind]
