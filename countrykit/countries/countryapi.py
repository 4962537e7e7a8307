"""Country lookup API.

Public API for country reference data: accessors, validators, search and
listing over the static ISO 3166-1 country table.

Every function here is total. Lookups that find nothing return None (single
values) or an empty list (collections) instead of raising. Single-code
accessors also log a WARNING on this module's logger when given an invalid
code; records propagate, so a handler on "countrykit" also receives them.
"""

import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from countrykit.countries.countryflags import get_flag
from countrykit.countries.countrysearch import (
    search_records as _search_records,
    filter_by_calling_code as _filter_by_calling_code,
)
from countrykit.countries.countrytable import (
    CALLING_CODE_PATTERN,
    get_country_table,
    load_countries,
    clear_cache,
)
from countrykit.utils.normalize import normalize_code

logger = logging.getLogger(__name__)


def _make_country(code: str, record) -> dict:
    return {"code": code, **record}


def _lookup(code: object) -> Optional[dict]:
    """Return the table record for a valid code, logging a warning otherwise."""
    if not is_valid_country_code(code):
        logger.warning(f"Invalid country code: {code!r}")
        return None
    upper = normalize_code(code)
    return _make_country(upper, get_country_table().records[upper])


# ---- Validation ----

def is_valid_country_code(code: object) -> bool:
    """Check whether code is a supported ISO 3166-1 alpha-2 code.

    Case-insensitive; whitespace is not trimmed. Non-string input is
    reported as invalid rather than raising.

    Examples:
        >>> is_valid_country_code("US")
        True

        >>> is_valid_country_code("us")
        True

        >>> is_valid_country_code("XX")
        False

        >>> is_valid_country_code(None)
        False
    """
    upper = normalize_code(code)
    if upper is None:
        return False
    return upper in get_country_table()


def is_valid_calling_code(calling_code: object) -> bool:
    """Check whether calling_code looks like an international calling code.

    A valid calling code is "+" followed by 1 to 4 ASCII digits and nothing
    else. The table is not consulted.

    Examples:
        >>> is_valid_calling_code("+44")
        True

        >>> is_valid_calling_code("44")
        False

        >>> is_valid_calling_code("+12345")
        False
    """
    if not isinstance(calling_code, str):
        return False
    return CALLING_CODE_PATTERN.fullmatch(calling_code) is not None


# ---- Single-code accessors ----

def get_country_name(code: str) -> Optional[str]:
    """Return the display name for an alpha-2 code, or None.

    Examples:
        >>> get_country_name("US")
        'United States of America'

        >>> get_country_name("gb")
        'United Kingdom'
    """
    country = _lookup(code)
    return country["name"] if country else None


def get_calling_code(code: str) -> Optional[str]:
    """Return the calling code (e.g. '+44') for an alpha-2 code, or None."""
    country = _lookup(code)
    return country["calling_code"] if country else None


def get_alpha3_code(code: str) -> Optional[str]:
    """Return the ISO 3166-1 alpha-3 code for an alpha-2 code, or None.

    Examples:
        >>> get_alpha3_code("US")
        'USA'
    """
    country = _lookup(code)
    return country["alpha3"] if country else None


def get_country_flag(code: str) -> Optional[str]:
    """Return the stored flag glyph for an alpha-2 code, or None.

    Unlike get_flag(), only codes present in the table produce a flag.
    """
    country = _lookup(code)
    return country["flag"] if country else None


def get_country_by_code(code: str) -> Optional[dict]:
    """Return the full country record for an alpha-2 code, or None.

    The returned "code" is always upper-case, whatever case was passed in.

    Examples:
        >>> get_country_by_code("us")
        {'code': 'US', 'name': 'United States of America', 'alpha3': 'USA',
         'calling_code': '+1', 'flag': '🇺🇸'}
    """
    return _lookup(code)


# ---- Enumeration ----

def get_all_countries() -> List[dict]:
    """Return every country record in table order.

    Each call builds a new list of new dicts, so callers may modify the
    result without affecting the table.
    """
    table = get_country_table()
    return [_make_country(code, table.records[code]) for code in table.codes]


def get_country_codes() -> List[str]:
    """Return all alpha-2 codes in table order."""
    return list(get_country_table().codes)


def get_country_names() -> List[str]:
    """Return all country names, in the same order as get_country_codes()."""
    return list(get_country_table().names)


def get_country_names_by_code() -> Dict[str, str]:
    """Return a code -> name mapping."""
    return dict(get_country_table().names_by_code)


def get_country_data() -> Dict[str, dict]:
    """Return a code -> {name, alpha3, calling_code, flag} mapping."""
    table = get_country_table()
    return {code: dict(table.records[code]) for code in table.codes}


def list_countries(calling_code: Optional[str] = None) -> pd.DataFrame:
    """List the country table, optionally filtered by calling code.

    Args:
        calling_code: Optional calling code filter (e.g. "+1")

    Returns:
        DataFrame copy with columns code, name, alpha3, calling_code, flag

    Examples:
        >>> list_countries(calling_code="+44")["code"].tolist()
        ['GB', 'GG', 'IM', 'JE']
    """
    df = load_countries()

    if calling_code is not None:
        df = df[df["calling_code"] == calling_code]

    return df


# ---- Search ----

def search_countries(
    query: Optional[str] = None,
    *,
    limit: Optional[int] = None,
    exact: bool = False,
    include_codes: bool = True,
) -> List[dict]:
    """Search countries by name and, optionally, by code.

    The query is trimmed and lower-cased, then compared against each
    country's lower-cased name (and alpha-2/alpha-3 codes when include_codes
    is set). Results follow table order and contain each country at most once.

    Args:
        query: Search text. None, empty and whitespace-only queries return [].
        limit: Maximum number of results. None means unbounded.
        exact: Require the whole field to equal the query (default: substring match)
        include_codes: Also match alpha-2 and alpha-3 codes (default: True)

    Returns:
        List of country record dicts

    Examples:
        >>> [c["code"] for c in search_countries("united kingdom")]
        ['GB']

        >>> [c["code"] for c in search_countries("United States of America", exact=True)]
        ['US']

        >>> len(search_countries("united", limit=2))
        2
    """
    results = _search_records(
        get_all_countries(),
        query,
        limit=limit,
        exact=exact,
        include_codes=include_codes,
    )
    logger.debug(
        f"search_countries({query!r}, limit={limit}, exact={exact}, "
        f"include_codes={include_codes}) -> {len(results)} results"
    )
    return results


def get_countries_by_calling_code(calling_code: str) -> List[dict]:
    """Return every country using calling_code, in table order.

    Invalid calling codes (see is_valid_calling_code) return [] without
    logging.

    Examples:
        >>> [c["code"] for c in get_countries_by_calling_code("+7")]
        ['KZ', 'RU']
    """
    if not is_valid_calling_code(calling_code):
        return []
    return _filter_by_calling_code(get_all_countries(), calling_code)


# ---- Identifier resolution ----

def country_identifier(name: str) -> Optional[str]:
    """Resolve an exact country name, alpha-2 or alpha-3 code to the alpha-2 code.

    Matching is case-insensitive and exact; there is no fuzzy fallback.

    Examples:
        >>> country_identifier("USA")
        'US'

        >>> country_identifier("united kingdom")
        'GB'

        >>> country_identifier("Untied States") is None
        True
    """
    matches = search_countries(name, limit=1, exact=True)
    return matches[0]["code"] if matches else None


def country_identifiers(names: Iterable[str]) -> List[Optional[str]]:
    """Batch form of country_identifier.

    Examples:
        >>> country_identifiers(["DEU", "Japan", "Atlantis"])
        ['DE', 'JP', None]
    """
    return [country_identifier(n) for n in names]


__all__ = [
    "is_valid_country_code",
    "is_valid_calling_code",
    "get_country_name",
    "get_calling_code",
    "get_alpha3_code",
    "get_country_flag",
    "get_flag",
    "get_country_by_code",
    "get_all_countries",
    "get_country_codes",
    "get_country_names",
    "get_country_names_by_code",
    "get_country_data",
    "load_countries",
    "list_countries",
    "clear_cache",
    "search_countries",
    "get_countries_by_calling_code",
    "country_identifier",
    "country_identifiers",
]
