"""Country reference data: lookup, validation and search."""

from countrykit.countries.countryapi import (
    is_valid_country_code,
    is_valid_calling_code,
    get_country_name,
    get_calling_code,
    get_alpha3_code,
    get_country_flag,
    get_flag,
    get_country_by_code,
    get_all_countries,
    get_country_codes,
    get_country_names,
    get_country_names_by_code,
    get_country_data,
    load_countries,
    list_countries,
    clear_cache,
    search_countries,
    get_countries_by_calling_code,
    country_identifier,
    country_identifiers,
)

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
