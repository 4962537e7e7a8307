"""
Flag Glyph Synthesis
--------------------

A national flag renders from a pair of Unicode regional indicator symbols,
one per letter of the ISO 3166-1 alpha-2 code. The indicator for letter X
sits at U+1F1E6 + (X - 'A'), i.e. 127397 + ord(X).

get_flag() works from the letters alone and never consults the country
table, so it produces a glyph for any two ASCII letters, including codes the
table does not contain. Use countryapi.get_country_flag() for a
table-checked lookup.

Examples:
  >>> get_flag("US")
  '🇺🇸'
  >>> get_flag("gb")
  '🇬🇧'
  >>> get_flag("USA")
  ''
"""

REGIONAL_INDICATOR_OFFSET = 127397


def get_flag(code: str) -> str:
    """Build the flag glyph for a two-letter code.

    Args:
        code: Two ASCII letters, any case

    Returns:
        Two-codepoint regional indicator pair, or "" if code is not
        exactly two ASCII letters
    """
    if not isinstance(code, str) or len(code) != 2:
        return ""
    if not (code.isascii() and code.isalpha()):
        return ""

    return "".join(chr(REGIONAL_INDICATOR_OFFSET + ord(ch)) for ch in code.upper())


__all__ = [
    "REGIONAL_INDICATOR_OFFSET",
    "get_flag",
]
