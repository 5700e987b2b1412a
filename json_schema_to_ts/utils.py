"""
Utility functions for JSON Schema to TypeScript generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

_PATH_SEPARATORS = re.compile(r"[/\\]+")

_UNSAFE_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots, slashes) to spaces."""
    return re.sub(r"[_\-./\\]", " ", text)


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def to_pascal_case(text: str) -> str:
    """Convert an API path, snake_case or camelCase text to PascalCase.

    Used to derive type names from YApi interface paths.

    Examples:
        "/api/user/get_info" -> "ApiUserGetInfo"
        "/api/v1/user-list" -> "ApiV1UserList"
        "getUserInfo" -> "GetUserInfo"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_unix_path(path: str) -> str:
    """Collapse runs of forward or back slashes into a single forward slash."""
    return _PATH_SEPARATORS.sub("/", path)


def to_safe_identifier(text: str) -> str:
    """Turn arbitrary text into a TypeScript type identifier.

    Characters that are not valid in an identifier act as word separators,
    each word gets an upper-cased first letter and the rest is kept as is,
    so "THISISAFAKETYPENAME" survives unchanged while "user status" becomes
    "UserStatus".
    """
    parts = [part for part in _UNSAFE_IDENTIFIER_CHARS.split(text) if part]
    name = "".join(part[0].upper() + part[1:] for part in parts)
    if not name or name[0].isdigit():
        name = "_" + name
    return name
