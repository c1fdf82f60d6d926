"""
Utility functions for GraphQL schema to TypeScript generator.
"""

import re

# An all-caps run is one word unless a lowercase letter follows it
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# Boundary between a lowercase letter or digit and an uppercase letter
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "userById" -> "UserById"
        "RED" -> "Red"
        "HTMLParser" -> "HtmlParser"

    Args:
        text: The text to convert (snake_case, camelCase, UPPER_SNAKE_CASE, or space-separated)

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def camel_to_snake_case(text: str) -> str:
    """Convert a camelCase option name to snake_case.

    Examples:
        "avoidOptionals" -> "avoid_optionals"
        "maybeValue" -> "maybe_value"
        "already_snake" -> "already_snake"
    """
    return _CAMEL_BOUNDARY.sub("_", text).lower()


def is_identifier(text: str) -> bool:
    """Whether text can be used unquoted as a TypeScript property or member name."""
    return bool(_IDENTIFIER.match(text))


def string_literal(value: str) -> str:
    """Render a single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def property_key(name: str) -> str:
    """Render a property or enum member key, quoting it when needed."""
    return name if is_identifier(name) else string_literal(name)
