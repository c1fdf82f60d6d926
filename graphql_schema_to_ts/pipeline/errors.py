"""
Errors raised while generating TypeScript declarations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .analyzer.ir_nodes import EmitResult


class GraphQLToTsError(Exception):
    """Base class for generator errors."""

    pass


class ConfigurationError(GraphQLToTsError):
    """Raised when an option value cannot be used.

    Wrapper overrides that do not parse as a TypeScript type expression
    are the typical case. Only declarations that reference the offending
    alias fail; the rest of the run continues.
    """

    def __init__(self, option: str, value: str, reason: str = ""):
        self.option = option
        self.value = value
        self.reason = reason
        message = f"Invalid value for '{option}': {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnresolvedReferenceError(GraphQLToTsError):
    """Raised when a field refers to a type missing from the schema graph.

    This aborts the run: nothing downstream of a broken graph can be trusted.
    """

    def __init__(self, type_name: str, location: str = ""):
        self.type_name = type_name
        self.location = location
        message = f"Unknown type '{type_name}'"
        if location:
            message += f" referenced by '{location}'"
        super().__init__(message)


class GenerationError(GraphQLToTsError):
    """Raised at the end of a run that collected configuration errors.

    Attributes:
        errors: Every ConfigurationError of the run, one per offending option
        result: The partial result, without the declarations that failed
    """

    def __init__(self, errors: list[ConfigurationError], result: EmitResult | None = None):
        self.errors = list(errors)
        self.result = result
        details = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} configuration error(s):\n{details}")
