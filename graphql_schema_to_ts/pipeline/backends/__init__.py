"""
Declaration backends.

Contains the TypeScript renderers and the declaration emitter.
"""

from __future__ import annotations

from .base import DeclarationBackend
from .emitter import CATEGORY_ORDER, DeclarationEmitter
from .enum_renderer import FUTURE_VALUE_SENTINEL, EnumRenderer
from .type_renderer import FUTURE_UNION_SENTINEL, Position, TypeReferenceRenderer
from .wrappers import WrapperTypeRegistry

__all__ = [
    "DeclarationBackend",
    "DeclarationEmitter",
    "CATEGORY_ORDER",
    "EnumRenderer",
    "FUTURE_VALUE_SENTINEL",
    "TypeReferenceRenderer",
    "Position",
    "FUTURE_UNION_SENTINEL",
    "WrapperTypeRegistry",
]
