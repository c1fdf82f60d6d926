"""
Wrapper type registry.

Owns the generic alias declarations that rendered field types refer to:
Maybe, InputMaybe, FieldWrapper and EntireFieldWrapper. Each alias has a
default body and an override option. Overrides are validated only when the
alias declaration is assembled, and an alias is materialized only if some
rendered declaration referenced it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ...type_expression import TypeExpressionError, parse_type_expression
from ..analyzer.ir_nodes import Declaration, DeclarationKind
from ..config import RenderConfig
from ..errors import ConfigurationError
from .base import DeclarationBackend

logger = logging.getLogger(__name__)

MAYBE = "Maybe"
INPUT_MAYBE = "InputMaybe"
FIELD_WRAPPER = "FieldWrapper"
ENTIRE_FIELD_WRAPPER = "EntireFieldWrapper"

# Canonical emission order, used to break ties between independent aliases
ALIAS_ORDER = (MAYBE, INPUT_MAYBE, FIELD_WRAPPER, ENTIRE_FIELD_WRAPPER)

# Alias name -> option that overrides its body
ALIAS_OPTIONS = {
    MAYBE: "maybeValue",
    INPUT_MAYBE: "inputMaybeValue",
    FIELD_WRAPPER: "fieldWrapperValue",
    ENTIRE_FIELD_WRAPPER: "entireFieldWrapperValue",
}


@dataclass
class MaterializedAliases:
    """Alias declarations of a run, plus the aliases that could not be emitted."""

    declarations: list[Declaration] = field(default_factory=list)

    # Aliases with an invalid body, or depending on one
    failed: set[str] = field(default_factory=set)

    errors: list[ConfigurationError] = field(default_factory=list)


class WrapperTypeRegistry(DeclarationBackend):
    """Registry of the wrapper alias declarations."""

    def __init__(self, config: RenderConfig):
        super().__init__(config)
        self.bodies = {
            MAYBE: config.maybe_value,
            INPUT_MAYBE: config.input_maybe_value,
            FIELD_WRAPPER: config.field_wrapper_value,
            ENTIRE_FIELD_WRAPPER: config.entire_field_wrapper_value,
        }

    @staticmethod
    def wrap(alias: str, inner: str) -> str:
        """Apply a wrapper alias to a rendered type."""
        return f"{alias}<{inner}>"

    def dependencies(self, alias: str) -> list[str]:
        """Other aliases referenced by an alias body, in canonical order."""
        body = self.bodies[alias]
        return [other for other in ALIAS_ORDER if other != alias and re.search(rf"\b{other}\s*<", body)]

    def emission_order(self, referenced: set[str] | frozenset[str]) -> list[str]:
        """
        Order the referenced aliases and their dependencies.

        Dependencies come before their dependents; otherwise canonical order
        applies. A dependency cycle is cut at the alias that closes it.

        Args:
            referenced: Alias names used by rendered declarations

        Returns:
            Alias names to materialize, in emission order
        """
        ordered: list[str] = []
        visiting: set[str] = set()

        def visit(alias: str) -> None:
            if alias in ordered or alias in visiting:
                return
            visiting.add(alias)
            for dependency in self.dependencies(alias):
                visit(dependency)
            visiting.discard(alias)
            ordered.append(alias)

        for alias in ALIAS_ORDER:
            if alias in referenced:
                visit(alias)
        return ordered

    def declaration(self, alias: str) -> Declaration:
        """
        Assemble one alias declaration, validating its body.

        Raises:
            ConfigurationError: If the body is not a valid TypeScript type expression
        """
        body = self.bodies[alias]
        try:
            parse_type_expression(body)
        except TypeExpressionError as e:
            raise ConfigurationError(ALIAS_OPTIONS[alias], body, str(e)) from e

        text = self.render_template("alias", name=alias, body=body)
        return Declaration(
            name=alias,
            kind=DeclarationKind.ALIAS,
            body=text,
            wrappers=frozenset(self.dependencies(alias)),
        )

    def materialize(self, referenced: set[str] | frozenset[str]) -> MaterializedAliases:
        """
        Build the alias declarations needed by a run.

        Errors are collected, not raised: an invalid alias only takes down
        the aliases and declarations that depend on it.

        Args:
            referenced: Alias names used by rendered declarations

        Returns:
            MaterializedAliases with declarations, failed aliases and errors
        """
        result = MaterializedAliases()
        for alias in self.emission_order(referenced):
            if any(dependency in result.failed for dependency in self.dependencies(alias)):
                logger.debug("Skipping alias %s: depends on a failed alias", alias)
                result.failed.add(alias)
                continue
            try:
                result.declarations.append(self.declaration(alias))
            except ConfigurationError as e:
                logger.debug("Alias %s failed: %s", alias, e)
                result.failed.add(alias)
                result.errors.append(e)
        return result
