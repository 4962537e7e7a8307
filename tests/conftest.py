"""Shared test fixtures and utilities for countrykit tests."""

import pytest
import pandas as pd

from countrykit.countries.countryflags import get_flag
from countrykit.countries.countrytable import clear_cache


def _build_row(code, name, alpha3, calling_code, flag=None):
    return {
        "code": code,
        "name": name,
        "alpha3": alpha3,
        "calling_code": calling_code,
        "flag": get_flag(code) if flag is None else flag,
    }


@pytest.fixture
def make_row():
    """Fixture returning a function that builds one country table row.

    The flag is synthesized from the code unless passed explicitly.

    Example:
        def test_something(make_row):
            row = make_row("US", "United States of America", "USA", "+1")
    """
    return _build_row


@pytest.fixture
def fresh_cache():
    """Clear the cached country table before and after the test.

    Use this in any test that loads a table other than the packaged one,
    so the next test sees the real data again.
    """
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def small_rows(make_row):
    """A minimal but valid country table (includes Namibia's "NA" code)."""
    return [
        make_row("CA", "Canada", "CAN", "+1"),
        make_row("NA", "Namibia", "NAM", "+264"),
        make_row("US", "United States of America", "USA", "+1"),
    ]


@pytest.fixture
def write_table(tmp_path):
    """Fixture returning a function that writes rows to a CSV or parquet file.

    Example:
        def test_something(write_table, small_rows):
            path = write_table(small_rows)
            df = load_countries(path)
    """
    def _write(rows, filename="countries.csv"):
        path = tmp_path / filename
        df = pd.DataFrame(rows)
        if path.suffix == ".parquet":
            df.to_parquet(path, index=False)
        else:
            df.to_csv(path, index=False, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_countries():
    """Fixture providing sample alpha-2 codes and their expected details.

    Returns a dict of code -> (name, alpha3, calling_code).
    """
    return {
        "US": ("United States of America", "USA", "+1"),
        "GB": ("United Kingdom", "GBR", "+44"),
        "CA": ("Canada", "CAN", "+1"),
        "DE": ("Germany", "DEU", "+49"),
        "FR": ("France", "FRA", "+33"),
        "JP": ("Japan", "JPN", "+81"),
        "NA": ("Namibia", "NAM", "+264"),
        "ZA": ("South Africa", "ZAF", "+27"),
    }
