"""Naming utilities for code generation."""

from __future__ import annotations

from functools import lru_cache

SEPARATOR = "_"


@lru_cache(maxsize=1024)
def format_name(value: str) -> str:
    """Convert a snake_case database identifier to a Go exported name.

    Every underscore-separated segment gets its first character uppercased;
    the remaining characters are kept as they are. Empty segments (leading,
    trailing or repeated underscores) contribute nothing.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> format_name("first_name")
        'FirstName'
        >>> format_name("userID")
        'UserID'
        >>> format_name("a__b")
        'AB'
    """
    return "".join(part[:1].upper() + part[1:] for part in value.split(SEPARATOR))
