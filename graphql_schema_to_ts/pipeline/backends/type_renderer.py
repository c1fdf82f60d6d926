"""
Type reference renderer.

Renders the type of one field, argument or input field into TypeScript,
applying list, nullability and wrapper policies, and decides whether the
member carries an optional marker.
"""

from __future__ import annotations

import logging
from enum import Enum

from ...utils import string_literal
from ..analyzer.ir_nodes import RenderedType
from ..analyzer.reference_resolver import ReferenceResolver
from ..config import RenderConfig
from ..schema_ast.nodes import FieldDef, TypeKind, TypeReference
from .base import unique_sentinel
from .enum_renderer import EnumRenderer
from .wrappers import ENTIRE_FIELD_WRAPPER, FIELD_WRAPPER, INPUT_MAYBE, MAYBE, WrapperTypeRegistry

logger = logging.getLogger(__name__)

# Catch-all arm for union members added after generation
FUTURE_UNION_SENTINEL = "%other"


class Position(str, Enum):
    """Where a type reference appears."""

    OUTPUT_FIELD = "output_field"
    INPUT_FIELD = "input_field"
    ARGUMENT = "argument"

    @property
    def is_input(self) -> bool:
        return self is not Position.OUTPUT_FIELD

    @staticmethod
    def of(field: FieldDef, argument: bool = False) -> Position:
        """The position of a field, or of a field argument."""
        if argument:
            return Position.ARGUMENT
        return Position.INPUT_FIELD if field.is_input_position else Position.OUTPUT_FIELD


def sentinel_arm(sentinel: str) -> str:
    """The object type used as the future-proof union arm."""
    return f"{{ __typename?: {string_literal(sentinel)} }}"


class TypeReferenceRenderer:
    """Renders type references for one run."""

    def __init__(
        self,
        config: RenderConfig,
        resolver: ReferenceResolver,
        wrappers: WrapperTypeRegistry,
        enum_renderer: EnumRenderer,
    ):
        """
        Initialize the renderer.

        Args:
            config: Resolved rendering policy
            resolver: Named type lookups for the schema graph
            wrappers: Registry providing the wrapper aliases
            enum_renderer: Provides the use-site names of enums
        """
        self.config = config
        self.resolver = resolver
        self.wrappers = wrappers
        self.enum_renderer = enum_renderer

    def render(self, type_ref: TypeReference, position: Position, location: str = "") -> RenderedType:
        """
        Render a type reference.

        Args:
            type_ref: The reference to render
            position: Whether it is an output field, input field or argument
            location: "Type.field" of the owner, for error messages

        Returns:
            RenderedType with the text and the wrapper aliases it uses

        Raises:
            UnresolvedReferenceError: If the named leaf is not in the schema graph
        """
        used: set[str] = set()
        text = self._render_level(type_ref, position, location, used)

        if self.config.wrap_entire_field_definitions and not position.is_input:
            text = self.wrappers.wrap(ENTIRE_FIELD_WRAPPER, text)
            used.add(ENTIRE_FIELD_WRAPPER)

        return RenderedType(text=text, wrappers=frozenset(used))

    def _render_level(self, type_ref: TypeReference, position: Position, location: str, used: set[str]) -> str:
        """Render one nesting level, innermost first."""
        if type_ref.is_list:
            inner = self._render_level(type_ref.of_type, position, location, used)
            array = "ReadonlyArray" if self.config.immutable_types else "Array"
            text = f"{array}<{inner}>"
        else:
            text = self.leaf_name(type_ref.named or "", position, location)
            if self.config.wrap_field_definitions and not position.is_input:
                text = self.wrappers.wrap(FIELD_WRAPPER, text)
                used.add(FIELD_WRAPPER)

        if type_ref.nullable:
            alias = INPUT_MAYBE if position.is_input else MAYBE
            text = self.wrappers.wrap(alias, text)
            used.add(alias)
        return text

    def leaf_name(self, name: str, position: Position, location: str = "") -> str:
        """
        Resolve a named leaf to its TypeScript type text.

        Raises:
            UnresolvedReferenceError: If the name is not in the schema graph
        """
        resolved = self.resolver.resolve(name, location)

        if resolved.kind == TypeKind.SCALAR:
            return f"Scalars[{string_literal(name)}]"

        if resolved.kind == TypeKind.ENUM:
            return self.enum_renderer.reference(resolved.type_def)

        if resolved.kind == TypeKind.INTERFACE and self.config.use_implementing_types and not position.is_input:
            implementors = self.resolver.implementing_types(name)
            if implementors:
                return " | ".join(self.union_arms(implementors))
            logger.debug("Interface %s has no implementing types, keeping the interface at %s", name, location)

        return name

    def union_arms(self, members: list[str] | tuple[str, ...]) -> list[str]:
        """Union member texts, with the future-proof arm when enabled."""
        arms = list(members)
        if self.config.future_proof_unions:
            arms.append(sentinel_arm(unique_sentinel(FUTURE_UNION_SENTINEL, set(members))))
        return arms

    def is_optional(self, field: FieldDef, position: Position) -> bool:
        """
        Whether the member carries an optional marker (`name?:`).

        Evaluated at the field's own level only: nullability of inner list
        items never makes a member optional.
        """
        avoid = self.config.avoid_optionals
        nullable = field.type_ref.nullable

        if position is Position.OUTPUT_FIELD:
            return nullable and not avoid.field

        site_avoided = avoid.input_value if position is Position.INPUT_FIELD else avoid.object
        if site_avoided:
            return False
        return nullable or (field.has_default and not avoid.default_value)
