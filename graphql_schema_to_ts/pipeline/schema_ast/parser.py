"""
GraphQL schema loader that builds the schema graph.

Phase 1 of the pipeline: turn a graphql-core schema (built from SDL or
from an introspection result) into the read-only SchemaGraph consumed by
the emitter. Schema validation is left to graphql-core.
"""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    build_client_schema,
    build_schema,
)
from graphql.pyutils import Undefined

from .nodes import EnumValueDef, FieldDef, SchemaGraph, SchemaTypeDef, TypeKind, TypeReference

logger = logging.getLogger(__name__)


class SchemaParser:
    """Converts graphql-core schemas into a SchemaGraph."""

    def parse(self, schema: GraphQLSchema) -> SchemaGraph:
        """
        Convert a graphql-core schema.

        Args:
            schema: A built graphql-core schema

        Returns:
            SchemaGraph with every named type except introspection types
        """
        types = []
        for name, named_type in schema.type_map.items():
            if name.startswith("__"):
                continue
            type_def = self._parse_named_type(named_type)
            if type_def is not None:
                types.append(type_def)

        logger.debug("Loaded %d named types from schema", len(types))
        return SchemaGraph(types)

    def _parse_named_type(self, named_type: GraphQLNamedType) -> SchemaTypeDef | None:
        """Convert one named type, or None for kinds the generator ignores."""
        description = named_type.description

        if isinstance(named_type, GraphQLScalarType):
            return SchemaTypeDef(kind=TypeKind.SCALAR, name=named_type.name, description=description)

        if isinstance(named_type, GraphQLEnumType):
            values = tuple(EnumValueDef(name=value_name, description=value.description) for value_name, value in named_type.values.items())
            return SchemaTypeDef(kind=TypeKind.ENUM, name=named_type.name, description=description, values=values)

        if isinstance(named_type, GraphQLObjectType):
            return SchemaTypeDef(
                kind=TypeKind.OBJECT,
                name=named_type.name,
                description=description,
                fields=self._parse_output_fields(named_type.fields),
                interfaces=tuple(interface.name for interface in named_type.interfaces),
            )

        if isinstance(named_type, GraphQLInterfaceType):
            return SchemaTypeDef(
                kind=TypeKind.INTERFACE,
                name=named_type.name,
                description=description,
                fields=self._parse_output_fields(named_type.fields),
                interfaces=tuple(interface.name for interface in named_type.interfaces),
            )

        if isinstance(named_type, GraphQLUnionType):
            return SchemaTypeDef(
                kind=TypeKind.UNION,
                name=named_type.name,
                description=description,
                members=tuple(member.name for member in named_type.types),
            )

        if isinstance(named_type, GraphQLInputObjectType):
            return SchemaTypeDef(
                kind=TypeKind.INPUT_OBJECT,
                name=named_type.name,
                description=description,
                fields=tuple(self._parse_input_value(name, input_field) for name, input_field in named_type.fields.items()),
            )

        logger.warning("Skipping unsupported named type %s", named_type.name)
        return None

    def _parse_output_fields(self, fields: dict[str, GraphQLField]) -> tuple[FieldDef, ...]:
        """Convert the fields of an object or interface type."""
        return tuple(
            FieldDef(
                name=name,
                type_ref=self._parse_type_reference(field.type),
                description=field.description,
                arguments=tuple(self._parse_input_value(arg_name, arg) for arg_name, arg in field.args.items()),
            )
            for name, field in fields.items()
        )

    def _parse_input_value(self, name: str, value: GraphQLArgument | GraphQLInputField) -> FieldDef:
        """Convert an argument or an input object field."""
        return FieldDef(
            name=name,
            type_ref=self._parse_type_reference(value.type),
            is_input_position=True,
            description=value.description,
            has_default=self._has_default(value),
        )

    @staticmethod
    def _has_default(value: GraphQLArgument | GraphQLInputField) -> bool:
        """Whether an argument or input field declares a default value."""
        if value.default_value is not Undefined:
            return True
        # graphql-core 3.3 keeps SDL and introspection defaults in `default`
        default = getattr(value, "default", None)
        if default is not None and default is not Undefined:
            return True
        ast_node = value.ast_node
        return ast_node is not None and ast_node.default_value is not None

    def _parse_type_reference(self, graphql_type: Any, nullable: bool = True) -> TypeReference:
        """Convert a possibly wrapped graphql-core type into a TypeReference."""
        if isinstance(graphql_type, GraphQLNonNull):
            return self._parse_type_reference(graphql_type.of_type, nullable=False)
        if isinstance(graphql_type, GraphQLList):
            return TypeReference.list_of(self._parse_type_reference(graphql_type.of_type), nullable=nullable)
        return TypeReference.to(graphql_type.name, nullable=nullable)


def parse_sdl(sdl: str) -> SchemaGraph:
    """Build a SchemaGraph from GraphQL SDL text."""
    return SchemaParser().parse(build_schema(sdl))


def parse_introspection(introspection: dict[str, Any]) -> SchemaGraph:
    """Build a SchemaGraph from an introspection query result."""
    # Accept both the bare result and the {"data": ...} envelope
    data = introspection.get("data", introspection)
    return SchemaParser().parse(build_client_schema(data))
