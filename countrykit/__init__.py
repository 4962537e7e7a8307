"""Country Kit - ISO 3166-1 country reference data

Public API for looking up, validating and searching country metadata:
alpha-2 and alpha-3 codes, display names, international calling codes and
flag glyphs.

Usage:
    from countrykit import get_country_name, search_countries, get_flag

    # Single-code lookups (case-insensitive, None if unknown)
    name = get_country_name("us")          # Returns: 'United States of America'
    alpha3 = get_alpha3_code("GB")         # Returns: 'GBR'

    # Validation
    is_valid_country_code("Fr")            # Returns: True
    is_valid_calling_code("+44")           # Returns: True

    # Search by name or code
    matches = search_countries("united", limit=3)

    # Countries sharing a calling code
    nanp = get_countries_by_calling_code("+1")   # US, CA, UM

    # Flag glyph straight from the letters
    flag = get_flag("de")                  # Returns: '🇩🇪'

Invalid codes passed to single-code accessors log a WARNING on the
"countrykit.countries.countryapi" logger, which propagates to "countrykit";
the library itself configures no handlers.
"""

__version__ = "0.0.1"

# ============================================================================
# Validation
# ============================================================================

from .countries.countryapi import (
    is_valid_country_code,   # Supported ISO 3166-1 alpha-2 code?
    is_valid_calling_code,   # "+" followed by 1-4 digits?
)

# ============================================================================
# Single-code accessors
# ============================================================================

from .countries.countryapi import (
    get_country_name,        # Code -> display name
    get_calling_code,        # Code -> calling code
    get_alpha3_code,         # Code -> alpha-3 code
    get_country_flag,        # Code -> stored flag glyph
    get_country_by_code,     # Code -> full record
)

# ============================================================================
# Enumeration, search and resolution
# ============================================================================

from .countries.countryapi import (
    get_all_countries,             # All records in table order
    get_country_codes,             # All alpha-2 codes
    get_country_names,             # All names
    get_country_names_by_code,     # Code -> name mapping
    get_country_data,              # Code -> record mapping
    search_countries,              # Name/code search
    get_countries_by_calling_code, # Countries sharing a calling code
    country_identifier,            # Exact name/code -> alpha-2
    country_identifiers,           # Batch form
)

# ============================================================================
# Data table
# ============================================================================

from .countries.countryapi import (
    load_countries,          # Country table as a DataFrame
    list_countries,          # Filtered copy of the table
    clear_cache,             # Reload the table on next access
)

# ============================================================================
# Flag synthesis
# ============================================================================

from .countries.countryflags import (
    get_flag,                # Two letters -> regional indicator pair
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # Validation
    # ========================================================================
    "is_valid_country_code",
    "is_valid_calling_code",

    # ========================================================================
    # Single-code accessors
    # ========================================================================
    "get_country_name",
    "get_calling_code",
    "get_alpha3_code",
    "get_country_flag",
    "get_country_by_code",

    # ========================================================================
    # Enumeration, search and resolution
    # ========================================================================
    "get_all_countries",
    "get_country_codes",
    "get_country_names",
    "get_country_names_by_code",
    "get_country_data",
    "search_countries",
    "get_countries_by_calling_code",
    "country_identifier",
    "country_identifiers",

    # ========================================================================
    # Data table
    # ========================================================================
    "load_countries",
    "list_countries",
    "clear_cache",

    # ========================================================================
    # Flag synthesis
    # ========================================================================
    "get_flag",
]
