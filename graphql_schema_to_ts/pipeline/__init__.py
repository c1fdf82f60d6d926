"""
Pipeline - GraphQL schema to TypeScript declaration generator.

This module turns a GraphQL type graph into TypeScript declarations in
a few phases:

1. Phase 1 (Parser): Load a graphql-core schema into a SchemaGraph
2. Phase 2 (Config): Resolve raw options into one RenderConfig
3. Phase 3 (Emitter): Render declarations in category order
4. Phase 4 (Wrappers): Materialize the referenced wrapper aliases up front
"""

from __future__ import annotations

from .analyzer import Declaration, DeclarationKind, EmitResult
from .config import (
    AvoidOptionals,
    ConfigResolver,
    EnumMode,
    NamingConvention,
    RenderConfig,
    TypeFilter,
    TypeScriptPluginConfig,
)
from .errors import ConfigurationError, GenerationError, GraphQLToTsError, UnresolvedReferenceError
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "TypeScriptPluginConfig",
    "RenderConfig",
    "ConfigResolver",
    "AvoidOptionals",
    "EnumMode",
    "TypeFilter",
    "NamingConvention",
    "Declaration",
    "DeclarationKind",
    "EmitResult",
    "GraphQLToTsError",
    "ConfigurationError",
    "UnresolvedReferenceError",
    "GenerationError",
]
