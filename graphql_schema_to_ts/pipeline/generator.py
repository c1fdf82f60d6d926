"""
Pipeline generator.

Runs the phases for one schema graph: resolve the configuration, emit
the declarations, and join them into one TypeScript source unit.
"""

from __future__ import annotations

import logging

from .analyzer.ir_nodes import EmitResult
from .backends.emitter import DeclarationEmitter
from .config import ConfigResolver, RenderConfig, TypeScriptPluginConfig
from .errors import GenerationError
from .schema_ast.nodes import SchemaGraph

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates TypeScript declarations from a schema graph."""

    def __init__(self, graph: SchemaGraph, config: TypeScriptPluginConfig | RenderConfig | dict | None = None):
        """
        Initialize the generator.

        Args:
            graph: The schema graph
            config: Raw options (dataclass or dict), an already resolved RenderConfig, or None for defaults
        """
        self.graph = graph
        if isinstance(config, RenderConfig):
            self.config = config
        else:
            self.config = ConfigResolver().resolve(config)

    def emit(self) -> EmitResult:
        """
        Emit the declarations without raising on configuration errors.

        Raises:
            UnresolvedReferenceError: If a field refers to an unknown type
        """
        logger.debug("Generating declarations for %d named types", len(self.graph))
        return DeclarationEmitter(self.config).emit(self.graph)

    def generate(self) -> str:
        """
        Generate the TypeScript source.

        Returns:
            The declarations joined into one source unit

        Raises:
            GenerationError: If any option was invalid; carries every error and the partial result
            UnresolvedReferenceError: If a field refers to an unknown type
        """
        result = self.emit()
        if result.errors:
            raise GenerationError(result.errors, result)
        return result.text
