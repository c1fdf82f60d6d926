"""
Reference resolver for named type lookups.

Resolves the named leaf of a type reference to its schema definition and
answers which object types implement an interface.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnresolvedReferenceError
from ..schema_ast.nodes import BUILT_IN_SCALARS, SchemaGraph, SchemaTypeDef, TypeKind


@dataclass(frozen=True)
class ResolvedRef:
    """A resolved named type."""

    name: str = ""
    kind: TypeKind = TypeKind.SCALAR

    # None for built-in scalars missing from the graph
    type_def: SchemaTypeDef | None = None


class ReferenceResolver:
    """Resolves type names against the schema graph."""

    def __init__(self, graph: SchemaGraph):
        """
        Initialize the resolver.

        Args:
            graph: The schema graph for this run
        """
        self.graph = graph
        self._implementors: dict[str, list[str]] = {}
        self._build_implementors()

    def _build_implementors(self) -> None:
        """Index object types by the interfaces they implement."""
        for type_def in self.graph.of_kind(TypeKind.OBJECT):
            for interface in type_def.interfaces:
                self._implementors.setdefault(interface, []).append(type_def.name)
        for names in self._implementors.values():
            names.sort()

    def resolve(self, name: str, location: str = "") -> ResolvedRef:
        """
        Resolve a type name.

        Args:
            name: The named leaf of a type reference
            location: "Type.field" of the referencing field, for error messages

        Returns:
            ResolvedRef for the named type

        Raises:
            UnresolvedReferenceError: If the name is neither in the graph nor a built-in scalar
        """
        type_def = self.graph.get(name)
        if type_def is not None:
            return ResolvedRef(name=name, kind=type_def.kind, type_def=type_def)
        if name in BUILT_IN_SCALARS:
            return ResolvedRef(name=name, kind=TypeKind.SCALAR)
        raise UnresolvedReferenceError(name, location)

    def implementing_types(self, interface_name: str) -> list[str]:
        """Object types implementing an interface, sorted by name."""
        return list(self._implementors.get(interface_name, []))
