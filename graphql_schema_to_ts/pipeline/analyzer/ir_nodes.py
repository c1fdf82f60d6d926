"""
Output node definitions.

These nodes represent rendered declarations, ready to be joined into
one TypeScript source unit. They are never mutated after creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import ConfigurationError


class DeclarationKind(str, Enum):
    """Kind of an emitted declaration."""

    ALIAS = "alias"  # Maybe, InputMaybe, FieldWrapper, EntireFieldWrapper
    SCALAR = "scalar"  # the Scalars map
    ENUM = "enum"
    INPUT_OBJECT = "inputObject"
    OBJECT = "object"
    ARGUMENTS = "arguments"  # <Type><Field>Args
    INTERFACE = "interface"
    UNION = "union"


@dataclass(frozen=True)
class Declaration:
    """One top-level declaration."""

    name: str = ""
    kind: DeclarationKind = DeclarationKind.OBJECT
    body: str = ""

    # Wrapper alias names referenced by the body
    wrappers: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RenderedType:
    """A rendered type reference and the wrapper aliases it used."""

    text: str = ""
    wrappers: frozenset[str] = frozenset()


@dataclass
class EmitResult:
    """The outcome of one emission run."""

    # Alias declarations first, then type declarations in category order
    declarations: list[Declaration] = field(default_factory=list)

    # Names of the materialized wrapper aliases, in emission order
    aliases: list[str] = field(default_factory=list)

    # One error per offending option
    errors: list[ConfigurationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def text(self) -> str:
        """The declarations joined into one source unit."""
        if not self.declarations:
            return ""
        return "\n\n".join(declaration.body for declaration in self.declarations) + "\n"

    def names(self) -> list[str]:
        """Declaration names, in output order."""
        return [declaration.name for declaration in self.declarations]
