"""Shared data loading utilities for the country table.

This module provides the data file search and loading patterns used by
countrykit.countries.countrytable, which look for data files in the
calling module's data/ directory.
"""

from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd


def find_data_file(module_file: str, filenames: List[str]) -> Optional[Path]:
    """Find a data file in the calling module's data/ directory.

    Candidates are tried in order, so list the preferred format first.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames in order of preference
                   (e.g., ['countries.parquet', 'countries.csv'])

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From countries/countrytable.py (data is in countries/data/)
        >>> path = find_data_file(__file__, ['countries.parquet', 'countries.csv'])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_parquet_or_csv(file_path: Path) -> pd.DataFrame:
    """Load DataFrame from parquet or CSV file based on extension.

    CSV files are read with every column as a string and with NA detection
    turned off, so that codes such as "NA" (Namibia) and calling codes such
    as "+1" survive unchanged.

    Args:
        file_path: Path to parquet or CSV file

    Returns:
        Loaded DataFrame

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path, engine="pyarrow")
    elif file_path.suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, object]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
]
