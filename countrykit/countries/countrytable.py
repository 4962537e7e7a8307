"""Country table loading, validation and derived indexes.

The country table is a static CSV shipped in countries/data/. It is read once
per process with pandas, validated, and turned into a frozen CountryTable
holding the lookup indexes every other module reads from:

  - records:        code -> {name, alpha3, calling_code, flag}
  - codes:          all alpha-2 codes in table order
  - names_by_code:  code -> name
  - names:          all names, same order as codes

Both the DataFrame and the CountryTable are cached with lru_cache. Call
clear_cache() after pointing COUNTRYKIT_DATA_PATH at a different file.
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

import pandas as pd

from countrykit.countries.countryflags import get_flag
from countrykit.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)

logger = logging.getLogger(__name__)

DATA_PATH_ENV_VAR = "COUNTRYKIT_DATA_PATH"

REQUIRED_COLUMNS = ["code", "name", "alpha3", "calling_code", "flag"]
RECORD_FIELDS = ["name", "alpha3", "calling_code", "flag"]

ALPHA2_PATTERN = re.compile(r"[A-Z]{2}")
ALPHA3_PATTERN = re.compile(r"[A-Z]{3}")
# ASCII digits only; \d would also accept other Unicode decimal digits
CALLING_CODE_PATTERN = re.compile(r"\+[0-9]{1,4}")


def validate_countries(df: pd.DataFrame) -> List[str]:
    """Check a country table against the record constraints.

    Args:
        df: Country table with the REQUIRED_COLUMNS

    Returns:
        List of human-readable issues (empty if the table is valid)
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        return [f"Missing required columns: {missing}"]

    issues = []

    duplicates = df[df.duplicated(subset=["code"], keep=False)]
    if not duplicates.empty:
        issues.append(f"Duplicate codes found: {sorted(set(duplicates['code']))}")

    for row in df[REQUIRED_COLUMNS].to_dict("records"):
        code = row["code"]
        if not all(isinstance(row[col], str) for col in REQUIRED_COLUMNS):
            issues.append(f"{code!r}: non-string value in row {row}")
            continue

        if not ALPHA2_PATTERN.fullmatch(code):
            issues.append(f"{code!r}: code must be two upper-case letters")
        if not row["name"].strip():
            issues.append(f"{code!r}: empty name")
        if not ALPHA3_PATTERN.fullmatch(row["alpha3"]):
            issues.append(f"{code!r}: invalid alpha3 {row['alpha3']!r}")
        if not CALLING_CODE_PATTERN.fullmatch(row["calling_code"]):
            issues.append(f"{code!r}: invalid calling code {row['calling_code']!r}")
        if row["flag"] != get_flag(code):
            issues.append(f"{code!r}: flag {row['flag']!r} is not the regional indicator pair for the code")

    return issues


@lru_cache(maxsize=1)
def _load_countries(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Read and validate the table once; callers must never modify the result."""
    source = "explicit path"
    if path is None:
        env_path = os.environ.get(DATA_PATH_ENV_VAR)
        if env_path:
            path = env_path
            source = DATA_PATH_ENV_VAR

    if path is None:
        found_path = find_data_file(
            module_file=__file__,
            filenames=["countries.parquet", "countries.csv"],
        )

        if found_path is None:
            countries_dir = Path(__file__).parent / "data"
            error_msg = format_not_found_error(
                subdirectory="countries",
                searched_locations=[
                    ("Module-local data", countries_dir),
                    ("Environment variable", os.environ.get(DATA_PATH_ENV_VAR, "Not set")),
                ],
                fix_instructions=[
                    "Reinstall countrykit so that countries/data/countries.csv is present.",
                    f"Or set {DATA_PATH_ENV_VAR} to point to a country table.",
                ],
            )
            raise FileNotFoundError(error_msg)

        path = found_path
        source = "package data"

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Country table not found ({source}): {path}")

    df = load_parquet_or_csv(path)

    issues = validate_countries(df)
    if issues:
        details = "\n".join(f"  - {issue}" for issue in issues)
        raise ValueError(f"Invalid country table {path}:\n{details}")

    logger.info(f"Loaded {len(df)} countries from {source}: {path}")
    return df[REQUIRED_COLUMNS].reset_index(drop=True)


def load_countries(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load and validate the country table.

    Source priority:
      1. Explicit path argument
      2. COUNTRYKIT_DATA_PATH environment variable
      3. Packaged countries/data/countries.csv

    The file is read once and cached; each call returns a copy, so changes
    to the returned DataFrame never reach the shared table.

    Args:
        path: Optional path to a .csv or .parquet country table

    Returns:
        DataFrame with columns code, name, alpha3, calling_code, flag,
        one row per country in table order

    Raises:
        FileNotFoundError: If no table can be found
        ValueError: If the table fails validation or has an unsupported extension

    Examples:
        >>> df = load_countries()
        >>> df[df["code"] == "US"]["alpha3"].iloc[0]
        'USA'
    """
    return _load_countries(path).copy()


@dataclass(frozen=True)
class CountryTable:
    """Read-only indexes over the loaded country table."""

    records: Mapping[str, Mapping[str, str]]
    codes: Tuple[str, ...]
    names_by_code: Mapping[str, str]
    names: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.codes)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self.records

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "CountryTable":
        records = {}
        for row in df[REQUIRED_COLUMNS].to_dict("records"):
            records[row["code"]] = MappingProxyType({field: row[field] for field in RECORD_FIELDS})

        names_by_code = {code: record["name"] for code, record in records.items()}

        return cls(
            records=MappingProxyType(records),
            codes=tuple(records),
            names_by_code=MappingProxyType(names_by_code),
            names=tuple(names_by_code.values()),
        )


@lru_cache(maxsize=1)
def get_country_table() -> CountryTable:
    """Build (once) and return the indexes over the cached country table."""
    return CountryTable.from_dataframe(_load_countries())


def clear_cache() -> None:
    """Drop the cached table and indexes so the next call reloads them."""
    _load_countries.cache_clear()
    get_country_table.cache_clear()
    logger.info("Cleared country table cache")


__all__ = [
    "DATA_PATH_ENV_VAR",
    "REQUIRED_COLUMNS",
    "CALLING_CODE_PATTERN",
    "CountryTable",
    "validate_countries",
    "load_countries",
    "get_country_table",
    "clear_cache",
]
