"""
Utility functions for the BrightBase binding generator.
"""

import re

# Separators between words in schema identifiers
_SEPARATOR_PATTERN = re.compile(r"[_-]")

# A name usable as a TypeScript type or value identifier
_TS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _split_into_segments(text: str) -> list[str]:
    """Split text on underscores and hyphens, dropping empty segments."""
    return [segment for segment in _SEPARATOR_PATTERN.split(text) if segment]


def snake_to_pascal_case(text: str) -> str:
    """Convert a snake_case or kebab-case schema identifier to PascalCase.

    Each segment is capitalized and the rest of the segment lower-cased, so
    interior capitals are not preserved.

    Examples:
        "user_profile" -> "UserProfile"
        "api-key" -> "ApiKey"
        "_leading__double" -> "LeadingDouble"
        "already_Camel" -> "AlreadyCamel"
        "" -> ""

    Args:
        text: The identifier to convert

    Returns:
        PascalCase string, empty if text has no segments
    """
    if not text:
        return ""
    return "".join(segment.capitalize() for segment in _split_into_segments(text))


def is_ts_identifier(text: str) -> bool:
    """Check whether text can be used verbatim as a TypeScript identifier."""
    return bool(_TS_IDENTIFIER_PATTERN.match(text))
