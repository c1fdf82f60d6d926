"""
Declaration emitter.

Walks the named types of a schema graph in a fixed category order and
builds one declaration per type (plus argument types for fields that take
arguments), then places the wrapper aliases those declarations reference
in front of them.
"""

from __future__ import annotations

import logging

from ...utils import property_key, snake_to_pascal_case, string_literal
from ..analyzer.ir_nodes import Declaration, DeclarationKind, EmitResult
from ..analyzer.reference_resolver import ReferenceResolver
from ..config import RenderConfig, TypeFilter
from ..schema_ast.nodes import BUILT_IN_SCALARS, FieldDef, SchemaGraph, SchemaTypeDef, TypeKind
from .base import DeclarationBackend
from .enum_renderer import EnumRenderer
from .type_renderer import Position, TypeReferenceRenderer
from .wrappers import WrapperTypeRegistry

logger = logging.getLogger(__name__)

# Fixed regardless of source order, so reordered schemas give identical output
CATEGORY_ORDER = (
    TypeKind.SCALAR,
    TypeKind.ENUM,
    TypeKind.INPUT_OBJECT,
    TypeKind.OBJECT,
    TypeKind.INTERFACE,
    TypeKind.UNION,
)

ALLOWED_KINDS = {
    TypeFilter.ALL: set(CATEGORY_ORDER),
    TypeFilter.ENUMS_AND_SCALARS: {TypeKind.SCALAR, TypeKind.ENUM},
    TypeFilter.ENUMS_ONLY: {TypeKind.ENUM},
}

DECLARATION_KINDS = {
    TypeKind.ENUM: DeclarationKind.ENUM,
    TypeKind.INPUT_OBJECT: DeclarationKind.INPUT_OBJECT,
    TypeKind.OBJECT: DeclarationKind.OBJECT,
    TypeKind.INTERFACE: DeclarationKind.INTERFACE,
    TypeKind.UNION: DeclarationKind.UNION,
}

BUILT_IN_SCALAR_TYPES = {
    "ID": "string",
    "String": "string",
    "Boolean": "boolean",
    "Int": "number",
    "Float": "number",
}

SCALARS_NAME = "Scalars"
SCALARS_DESCRIPTION = "All built-in and custom scalars, mapped to their actual values"


class DeclarationEmitter(DeclarationBackend):
    """Builds the ordered declarations for a schema graph."""

    def __init__(self, config: RenderConfig):
        super().__init__(config)
        self.wrappers = WrapperTypeRegistry(config)
        self.enum_renderer = EnumRenderer(config)

    def emit(self, graph: SchemaGraph) -> EmitResult:
        """
        Emit the declarations for a schema graph.

        Args:
            graph: The schema graph

        Returns:
            EmitResult with alias declarations first, then type declarations
            in category order. Declarations that reference an invalid wrapper
            alias are left out and the errors collected.

        Raises:
            UnresolvedReferenceError: If a field refers to an unknown type
        """
        type_renderer = TypeReferenceRenderer(self.config, ReferenceResolver(graph), self.wrappers, self.enum_renderer)
        allowed = ALLOWED_KINDS[self.config.type_filter]

        rendered: list[Declaration] = []
        for kind in CATEGORY_ORDER:
            if kind not in allowed:
                continue
            if kind == TypeKind.SCALAR:
                rendered.append(self.render_scalars(graph))
                continue
            for type_def in sorted(graph.of_kind(kind), key=lambda t: t.name):
                rendered.extend(self.render_type(type_def, type_renderer))

        referenced: set[str] = set()
        for declaration in rendered:
            referenced |= declaration.wrappers

        aliases = self.wrappers.materialize(referenced)
        kept = [declaration for declaration in rendered if not declaration.wrappers & aliases.failed]
        if len(kept) < len(rendered):
            logger.debug("Dropped %d declaration(s) referencing failed aliases %s", len(rendered) - len(kept), sorted(aliases.failed))

        result = EmitResult(
            declarations=aliases.declarations + kept,
            aliases=[declaration.name for declaration in aliases.declarations],
            errors=aliases.errors,
        )
        logger.debug("Emitted %d declaration(s), %d alias(es)", len(result.declarations), len(result.aliases))
        return result

    def render_type(self, type_def: SchemaTypeDef, type_renderer: TypeReferenceRenderer) -> list[Declaration]:
        """Render the declarations for one named type."""
        if type_def.kind == TypeKind.ENUM:
            return [self.enum_renderer.render(type_def)]
        if type_def.kind == TypeKind.UNION:
            return [self.render_union(type_def, type_renderer)]
        if type_def.kind == TypeKind.INPUT_OBJECT:
            return [self.render_object_like(type_def, type_renderer)]
        if type_def.kind in (TypeKind.OBJECT, TypeKind.INTERFACE):
            declarations = [self.render_object_like(type_def, type_renderer)]
            for field in type_def.fields:
                if field.arguments:
                    declarations.append(self.render_arguments(type_def, field, type_renderer))
            return declarations
        return []

    def render_scalars(self, graph: SchemaGraph) -> Declaration:
        """Render the Scalars map: built-ins first, then custom scalars by name."""
        # Built-in scalar descriptions are the same for every schema, so they are not repeated
        members = [{"line": f"{name}: {self.config.scalar_type(name) or BUILT_IN_SCALAR_TYPES[name]}", "comment": None} for name in BUILT_IN_SCALARS]

        custom = [type_def for type_def in graph.of_kind(TypeKind.SCALAR) if type_def.name not in BUILT_IN_SCALARS]
        for type_def in sorted(custom, key=lambda t: t.name):
            scalar_type = self.config.scalar_type(type_def.name) or self.config.default_scalar_type
            members.append(
                {
                    "line": f"{property_key(type_def.name)}: {scalar_type}",
                    "comment": self.description_comment(type_def.description),
                }
            )

        body = self.render_template(
            "object",
            name=SCALARS_NAME,
            comment=self.description_comment(SCALARS_DESCRIPTION),
            members=members,
        )
        return Declaration(name=SCALARS_NAME, kind=DeclarationKind.SCALAR, body=body)

    def render_object_like(self, type_def: SchemaTypeDef, type_renderer: TypeReferenceRenderer) -> Declaration:
        """Render an object, interface or input object as a type literal.

        Each member is rendered as an input or output position according to
        its own `is_input_position` flag.
        """
        members = []
        wrappers: set[str] = set()

        if type_def.kind == TypeKind.OBJECT and not self.config.skip_typename:
            marker = "" if self.config.non_optional_typename else "?"
            members.append({"line": f"{self.readonly_prefix}__typename{marker}: {string_literal(type_def.name)}", "comment": None})

        for field in type_def.fields:
            member, used = self.render_member(type_def.name, field, type_renderer, Position.of(field))
            members.append(member)
            wrappers |= used

        body = self.render_template(
            "object",
            name=type_def.name,
            comment=self.description_comment(type_def.description),
            members=members,
        )
        return Declaration(name=type_def.name, kind=DECLARATION_KINDS[type_def.kind], body=body, wrappers=frozenset(wrappers))

    def render_arguments(self, owner: SchemaTypeDef, field: FieldDef, type_renderer: TypeReferenceRenderer) -> Declaration:
        """Render the `<Owner><Field>Args` type for a field's arguments."""
        name = f"{owner.name}{snake_to_pascal_case(field.name)}Args"
        members = []
        wrappers: set[str] = set()
        for argument in field.arguments:
            member, used = self.render_member(f"{owner.name}.{field.name}", argument, type_renderer, Position.of(argument, argument=True))
            members.append(member)
            wrappers |= used

        body = self.render_template("object", name=name, comment=None, members=members)
        return Declaration(name=name, kind=DeclarationKind.ARGUMENTS, body=body, wrappers=frozenset(wrappers))

    def render_member(self, owner: str, field: FieldDef, type_renderer: TypeReferenceRenderer, position: Position) -> tuple[dict, frozenset[str]]:
        """Render one member line and report the wrapper aliases it used."""
        rendered = type_renderer.render(field.type_ref, position, f"{owner}.{field.name}")
        marker = "?" if type_renderer.is_optional(field, position) else ""
        member = {
            "line": f"{self.readonly_prefix}{property_key(field.name)}{marker}: {rendered.text}",
            "comment": self.description_comment(field.description),
        }
        return member, rendered.wrappers

    def render_union(self, type_def: SchemaTypeDef, type_renderer: TypeReferenceRenderer) -> Declaration:
        """Render a union as a type alias over its member types."""
        for member in type_def.members:
            type_renderer.resolver.resolve(member, type_def.name)

        arms = type_renderer.union_arms(type_def.members) or ["never"]
        body = self.render_template(
            "union",
            name=type_def.name,
            comment=self.description_comment(type_def.description),
            members=arms,
        )
        return Declaration(name=type_def.name, kind=DeclarationKind.UNION, body=body)
