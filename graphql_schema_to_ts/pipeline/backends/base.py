"""
Base class for TypeScript declaration backends.

Holds the Jinja2 environment and the formatting helpers shared by the
wrapper registry, the enum renderer and the declaration emitter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from ..config import RenderConfig


def unique_sentinel(base: str, taken: set[str]) -> str:
    """
    Pick a sentinel name that collides with nothing in `taken`.

    Appends _1, _2, ... to the base name until the result is unique.
    """
    if base not in taken:
        return base
    suffix = 1
    while f"{base}_{suffix}" in taken:
        suffix += 1
    return f"{base}_{suffix}"


class DeclarationBackend:
    """Shared template and formatting support."""

    # Template directory name
    TEMPLATE_LANG: str = "typescript"

    # File extension of the generated code
    FILE_EXTENSION: str = "ts"

    # Indentation of members inside a declaration body
    INDENT = "  "

    def __init__(self, config: RenderConfig):
        """
        Initialize the backend.

        Args:
            config: Resolved rendering policy
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            autoescape=False,
        )

    def render_template(self, template_name: str, **context: Any) -> str:
        """Render one declaration template, without trailing newlines."""
        template = self.jinja_env.get_template(f"{template_name}.{self.FILE_EXTENSION}.jinja2")
        context.setdefault("export", self.export_prefix)
        return template.render(**context).rstrip("\n")

    @property
    def export_prefix(self) -> str:
        return "" if self.config.no_export else "export "

    @property
    def readonly_prefix(self) -> str:
        return "readonly " if self.config.immutable_types else ""

    def description_comment(self, description: str | None) -> str | None:
        """
        Format a description as a doc comment.

        Args:
            description: Description text from the schema

        Returns:
            The comment, or None when there is no description or descriptions are disabled
        """
        if self.config.disable_descriptions or not description or not description.strip():
            return None

        lines = [line.rstrip().replace("*/", "*\\/") for line in description.strip().splitlines()]
        if len(lines) == 1:
            return f"/** {lines[0]} */"
        body = "\n".join(f" * {line}" if line else " *" for line in lines)
        return f"/**\n{body}\n */"
