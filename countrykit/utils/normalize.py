"""Shared text normalization utilities.

Country lookups are deliberately plain: codes are compared after
upper-casing, search queries after trimming and lower-casing. No Unicode
folding or punctuation stripping is applied, so "Côte d'Ivoire" only matches
a query that spells it the same way.
"""

from typing import Optional


def normalize_code(code: object) -> Optional[str]:
    """Upper-case a country code for table lookup.

    Args:
        code: Candidate alpha-2 code (any case, any type)

    Returns:
        Upper-cased code, or None for non-string or empty input.
        Whitespace is not trimmed.

    Examples:
        >>> normalize_code("us")
        'US'

        >>> normalize_code(" us")
        ' US'

        >>> normalize_code(42) is None
        True
    """
    if not isinstance(code, str) or not code:
        return None
    return code.upper()


def normalize_query(query: object) -> str:
    """Trim and lower-case a free-text search query.

    Args:
        query: Raw query (None and non-strings are treated as empty)

    Returns:
        Normalized query, or "" when there is nothing to search for

    Examples:
        >>> normalize_query("  United ")
        'united'

        >>> normalize_query(None)
        ''
    """
    if not isinstance(query, str):
        return ""
    return query.strip().lower()


__all__ = [
    "normalize_code",
    "normalize_query",
]
