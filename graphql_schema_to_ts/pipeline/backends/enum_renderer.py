"""
Enum renderer.

Turns one enum type into a declaration in the resolved enum mode:
a (const) enum, a string-literal union type, or a const object with a
derived type.
"""

from __future__ import annotations

import logging
from typing import Any

from ...utils import property_key, snake_to_pascal_case, string_literal
from ..analyzer.ir_nodes import Declaration, DeclarationKind
from ..config import EnumMode, NamingConvention
from ..schema_ast.nodes import SchemaTypeDef
from .base import DeclarationBackend, unique_sentinel

logger = logging.getLogger(__name__)

# Catch-all member for values added to the schema after generation
FUTURE_VALUE_SENTINEL = "%future added value"


class EnumRenderer(DeclarationBackend):
    """Renders enum declarations and enum use-site names."""

    def render(self, enum_def: SchemaTypeDef) -> Declaration:
        """
        Render an enum declaration.

        Args:
            enum_def: An enum type definition

        Returns:
            One Declaration in the resolved enum mode
        """
        mode = self.config.enum_mode
        members = self._members(enum_def)

        body = self.render_template(
            "enum",
            name=enum_def.name,
            mode=mode.value,
            comment=self.description_comment(enum_def.description),
            members=members,
        )
        return Declaration(name=enum_def.name, kind=DeclarationKind.ENUM, body=body)

    def reference(self, enum_def: SchemaTypeDef) -> str:
        """The type text used where a field refers to this enum."""
        name = enum_def.name
        if self.config.allow_enum_string_types and self.config.enum_mode in (EnumMode.ENUM, EnumMode.CONST_ENUM):
            return f"{name} | `${{{name}}}`"
        return name

    def sentinel(self, enum_def: SchemaTypeDef) -> str:
        """The future-proofing sentinel for an enum, unique among its members."""
        taken = set(self.member_keys(enum_def))
        for value in enum_def.values:
            taken.add(value.name)
            taken.add(value.literal)
        return unique_sentinel(FUTURE_VALUE_SENTINEL, taken)

    def member_key(self, name: str) -> str:
        """Apply the naming convention to an enum member name."""
        if self.config.naming_convention == NamingConvention.PASCAL_CASE:
            return snake_to_pascal_case(name) or name
        return name

    def member_keys(self, enum_def: SchemaTypeDef) -> list[str]:
        """
        Member keys in declared order, unique within the enum.

        Values the naming convention maps to an already used key get a
        _1, _2, ... suffix.
        """
        keys: list[str] = []
        for value in enum_def.values:
            key = self.member_key(value.name)
            if key in keys:
                unique = unique_sentinel(key, set(keys) | {v.name for v in enum_def.values})
                logger.warning("Enum %s: value %s maps to existing key %s, using %s", enum_def.name, value.name, key, unique)
                key = unique
            keys.append(key)
        return keys

    def _members(self, enum_def: SchemaTypeDef) -> list[dict[str, Any]]:
        """Template context for the enum members, sentinel included."""
        members = []
        for index, (value, key) in enumerate(zip(enum_def.values, self.member_keys(enum_def))):
            members.append(
                {
                    "key": property_key(key),
                    "value": str(index) if self.config.numeric_enums else string_literal(value.literal),
                    "comment": self.description_comment(value.description),
                }
            )

        if self.config.future_proof_enums:
            sentinel = self.sentinel(enum_def)
            members.append(
                {
                    "key": property_key(sentinel),
                    "value": str(len(enum_def.values)) if self.config.numeric_enums else string_literal(sentinel),
                    "comment": None,
                }
            )
        return members
