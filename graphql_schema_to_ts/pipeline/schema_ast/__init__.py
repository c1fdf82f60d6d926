"""
Schema graph module.

Contains the schema node definitions and the graphql-core loader.
"""

from __future__ import annotations

from .nodes import (
    BUILT_IN_SCALARS,
    EnumValueDef,
    FieldDef,
    SchemaGraph,
    SchemaTypeDef,
    TypeKind,
    TypeReference,
)
from .parser import SchemaParser, parse_introspection, parse_sdl

__all__ = [
    "BUILT_IN_SCALARS",
    "EnumValueDef",
    "FieldDef",
    "SchemaGraph",
    "SchemaTypeDef",
    "TypeKind",
    "TypeReference",
    "SchemaParser",
    "parse_sdl",
    "parse_introspection",
]
