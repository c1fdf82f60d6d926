"""
Analyzer module.

Contains reference resolution and the output node definitions.
"""

from __future__ import annotations

from .ir_nodes import Declaration, DeclarationKind, EmitResult, RenderedType
from .reference_resolver import ReferenceResolver, ResolvedRef

__all__ = [
    "Declaration",
    "DeclarationKind",
    "EmitResult",
    "RenderedType",
    "ReferenceResolver",
    "ResolvedRef",
]
