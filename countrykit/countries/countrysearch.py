"""
Country Search
--------------

Linear scans over country records (dicts with code, name, alpha3,
calling_code, flag).

search_records() matches a query against each record's name and, optionally,
its alpha-2 and alpha-3 codes. Matching is case-insensitive and either exact
(equality) or substring containment. Results keep table order; there is no
relevance ranking and no index, so each search is O(number of countries).
That is fine for a static table of a few hundred rows.

filter_by_calling_code() returns every record with a given calling code,
again in table order.

Examples:
  >>> from countrykit.countries.countryapi import get_all_countries
  >>> codes = [c["code"] for c in search_records(get_all_countries(), "united")]
  >>> "US" in codes and "GB" in codes
  True
"""

from typing import Iterable, List, Optional

from countrykit.utils.normalize import normalize_query


def _field_matches(value: str, query: str, exact: bool) -> bool:
    value = value.lower()
    return value == query if exact else query in value


def record_matches(
    record: dict,
    query: str,
    *,
    exact: bool = False,
    include_codes: bool = True,
) -> bool:
    """Test one record against an already-normalized query.

    Args:
        record: Country record dict
        query: Trimmed, lower-cased query
        exact: Require equality instead of substring containment
        include_codes: Also test the alpha-2 and alpha-3 codes

    Returns:
        True if any tested field matches
    """
    fields = [record["name"]]
    if include_codes:
        fields.extend([record["code"], record["alpha3"]])

    return any(_field_matches(value, query, exact) for value in fields)


def search_records(
    records: Iterable[dict],
    query: Optional[str],
    *,
    limit: Optional[int] = None,
    exact: bool = False,
    include_codes: bool = True,
) -> List[dict]:
    """Return records matching query, de-duplicated by code, in input order.

    Args:
        records: Country record dicts to scan
        query: Search text; None, non-strings and blank strings match nothing
        limit: Maximum number of results (None = unbounded, <= 0 = none)
        exact: Require the whole field to equal the query
        include_codes: Match alpha-2 and alpha-3 codes as well as names

    Returns:
        List of matching records
    """
    normalized = normalize_query(query)
    if not normalized:
        return []
    if limit is not None and limit <= 0:
        return []

    seen = set()
    matches = []
    for record in records:
        if record["code"] in seen:
            continue
        if record_matches(record, normalized, exact=exact, include_codes=include_codes):
            seen.add(record["code"])
            matches.append(record)
            if limit is not None and len(matches) >= limit:
                break

    return matches


def filter_by_calling_code(records: Iterable[dict], calling_code: str) -> List[dict]:
    """Return records whose calling_code equals calling_code exactly."""
    return [record for record in records if record["calling_code"] == calling_code]


__all__ = [
    "record_matches",
    "search_records",
    "filter_by_calling_code",
]
