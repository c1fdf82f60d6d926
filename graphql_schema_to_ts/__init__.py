"""GraphQL Schema to TypeScript Generator

A Python package for generating TypeScript type declarations from a
GraphQL schema. Supports configurable nullability wrappers, enum
representations, field wrappers and output filtering.
"""

__version__ = "1.0.0"

from .pipeline import (
    ConfigResolver,
    ConfigurationError,
    GenerationError,
    PipelineGenerator,
    RenderConfig,
    TypeScriptPluginConfig,
    UnresolvedReferenceError,
)
from .pipeline.schema_ast import SchemaGraph, parse_introspection, parse_sdl

__all__ = [
    "PipelineGenerator",
    "TypeScriptPluginConfig",
    "RenderConfig",
    "ConfigResolver",
    "ConfigurationError",
    "UnresolvedReferenceError",
    "GenerationError",
    "SchemaGraph",
    "parse_sdl",
    "parse_introspection",
]
