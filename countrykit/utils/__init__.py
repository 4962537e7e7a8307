"""Shared utilities for the countrykit package."""

from countrykit.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from countrykit.utils.normalize import (
    normalize_code,
    normalize_query,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
    # Normalization
    "normalize_code",
    "normalize_query",
]
