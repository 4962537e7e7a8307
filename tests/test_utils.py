"""Tests for shared utilities."""

import pytest
from pathlib import Path
import pandas as pd

from countrykit.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from countrykit.utils.normalize import normalize_code, normalize_query


class TestFindDataFile:
    """Test data file finding utility"""

    def test_find_module_local_data(self):
        """Test finding the packaged country table in countries/data/"""
        from countrykit.countries import countrytable
        path = find_data_file(
            module_file=countrytable.__file__,
            filenames=["countries.parquet", "countries.csv"],
        )
        assert path is not None
        assert path.exists()
        assert path.name == "countries.csv"

    def test_filenames_tried_in_order(self, tmp_path):
        """The first candidate present in data/ wins"""
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "things.csv").write_text("a\n1\n")
        (data_dir / "things.parquet").write_bytes(b"")

        path = find_data_file(
            module_file=str(tmp_path / "api.py"),
            filenames=["things.parquet", "things.csv"],
        )
        assert path == data_dir / "things.parquet"

    def test_only_data_directory_is_searched(self, tmp_path):
        """Files beside the module, outside data/, are not found"""
        (tmp_path / "things.csv").write_text("a\n1\n")

        path = find_data_file(
            module_file=str(tmp_path / "api.py"),
            filenames=["things.csv"],
        )
        assert path is None

    def test_find_nonexistent_file(self):
        """Test that None is returned when file not found"""
        from countrykit.countries import countrytable
        path = find_data_file(
            module_file=countrytable.__file__,
            filenames=["missing.parquet"],
        )
        assert path is None


class TestLoadParquetOrCsv:
    """Test data loading utility"""

    def test_load_parquet(self, tmp_path):
        """Test loading parquet file"""
        temp_path = tmp_path / "data.parquet"
        pd.DataFrame({"a": ["1", "2", "3"], "b": ["4", "5", "6"]}).to_parquet(temp_path)

        loaded_df = load_parquet_or_csv(temp_path)
        assert isinstance(loaded_df, pd.DataFrame)
        assert len(loaded_df) == 3
        assert list(loaded_df.columns) == ["a", "b"]

    def test_load_csv(self, tmp_path):
        """Test loading CSV file"""
        temp_path = tmp_path / "data.csv"
        temp_path.write_text("a,b\n1,4\n2,5\n3,6\n")

        loaded_df = load_parquet_or_csv(temp_path)
        assert isinstance(loaded_df, pd.DataFrame)
        assert len(loaded_df) == 3
        assert list(loaded_df.columns) == ["a", "b"]

    def test_csv_keeps_strings(self, tmp_path):
        """NA must not become NaN and +1 must not become an integer"""
        temp_path = tmp_path / "data.csv"
        temp_path.write_text("code,calling_code\nNA,+264\nUS,+1\n")

        loaded_df = load_parquet_or_csv(temp_path)
        assert loaded_df["code"].tolist() == ["NA", "US"]
        assert loaded_df["calling_code"].tolist() == ["+264", "+1"]

    def test_unsupported_format(self):
        """Test that unsupported formats raise ValueError"""
        temp_path = Path("/tmp/test.txt")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_parquet_or_csv(temp_path)


class TestFormatNotFoundError:
    """Test error message formatting utility"""

    def test_format_basic_error(self):
        """Test basic error message formatting"""
        msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                ("Location 1", Path("/path/1")),
                ("Environment variable", "Not set"),
            ],
            fix_instructions=[
                "Reinstall the package",
                "Set the environment variable",
            ],
        )

        assert "No countries data found" in msg
        assert "Searched:" in msg
        assert "Location 1" in msg
        assert "/path/1" in msg
        assert "Not set" in msg
        assert "To fix:" in msg
        assert "Reinstall the package" in msg
        assert "Set the environment variable" in msg


class TestNormalize:
    """Test code and query normalization"""

    def test_normalize_code(self):
        assert normalize_code("us") == "US"
        assert normalize_code("Gb") == "GB"

    def test_normalize_code_does_not_trim(self):
        assert normalize_code(" us") == " US"

    @pytest.mark.parametrize("value", [None, "", 42, ["US"], b"US"])
    def test_normalize_code_rejects(self, value):
        assert normalize_code(value) is None

    def test_normalize_query(self):
        assert normalize_query("  United States ") == "united states"

    @pytest.mark.parametrize("value", [None, "", "   ", 3.5])
    def test_normalize_query_empty(self, value):
        assert normalize_query(value) == ""
