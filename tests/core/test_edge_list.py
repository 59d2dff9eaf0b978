"""Tests for EdgeListLoader."""

import logging

import pandas as pd
import pytest

from dsforest.core.edge_list import EdgeListLoader, EdgeListResult


class TestEdgeListLoader:
    """Tests for EdgeListLoader class."""

    @pytest.fixture
    def loader(self):
        """Create EdgeListLoader instance."""
        return EdgeListLoader()

    @pytest.fixture
    def edges_csv(self, tmp_path):
        """Create a valid edge list CSV."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"source": [0, 1, 3, 0], "target": [1, 2, 4, 2]}).to_csv(
            csv_path, index=False
        )
        return csv_path

    def test_load_success(self, loader, edges_csv):
        """Test loading a well-formed edge list."""
        result = loader.load(edges_csv)

        assert isinstance(result, EdgeListResult)
        assert result.edges == [(0, 1), (1, 2), (3, 4), (0, 2)]
        assert result.inferred_size == 5
        assert result.row_count == 4
        assert all(isinstance(a, int) and isinstance(b, int) for a, b in result.edges)

    def test_extra_columns_ignored(self, loader, tmp_path):
        """Test columns other than the endpoints are ignored."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"source": [2], "target": [0], "weight": [0.5]}).to_csv(
            csv_path, index=False
        )
        assert loader.load(csv_path).edges == [(2, 0)]

    def test_custom_columns(self, tmp_path):
        """Test loading with custom endpoint column names."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"u": [0, 6], "v": [1, 2]}).to_csv(csv_path, index=False)

        result = EdgeListLoader(source_column="u", target_column="v").load(csv_path)
        assert result.edges == [(0, 1), (6, 2)]
        assert result.inferred_size == 7

    def test_file_not_found(self, loader, tmp_path):
        """Test a nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="CSV file not found"):
            loader.load(tmp_path / "missing.csv")

    def test_missing_columns(self, loader, tmp_path):
        """Test a CSV without the endpoint columns raises ValueError."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"from": [0], "to": [1]}).to_csv(csv_path, index=False)

        with pytest.raises(ValueError, match="missing required columns"):
            loader.load(csv_path)

    @pytest.mark.parametrize("bad_value", ["a", 1.5])
    def test_non_integer_values(self, loader, tmp_path, bad_value):
        """Test non-integer endpoints raise ValueError."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"source": [0, bad_value], "target": [1, 2]}).to_csv(
            csv_path, index=False
        )

        with pytest.raises(ValueError, match="must contain integer indices"):
            loader.load(csv_path)

    def test_incomplete_rows_dropped(self, loader, tmp_path, caplog):
        """Test rows with a missing endpoint are dropped with a warning."""
        csv_path = tmp_path / "edges.csv"
        pd.DataFrame({"source": [0, None, 2], "target": [1, 2, 3]}).to_csv(
            csv_path, index=False
        )

        with caplog.at_level(logging.WARNING, logger="dsforest.core.edge_list"):
            result = loader.load(csv_path)

        assert result.edges == [(0, 1), (2, 3)]
        assert result.row_count == 3
        assert result.inferred_size == 4
        assert "Dropped 1 rows" in caplog.text

    def test_header_only(self, loader, tmp_path):
        """Test a CSV with only a header yields no edges."""
        csv_path = tmp_path / "edges.csv"
        csv_path.write_text("source,target\n")

        result = loader.load(csv_path)
        assert result.edges == []
        assert result.inferred_size == 0
        assert result.row_count == 0

    def test_empty_file(self, loader, tmp_path):
        """Test a completely empty file yields no edges."""
        csv_path = tmp_path / "edges.csv"
        csv_path.write_text("")

        result = loader.load(csv_path)
        assert result.edges == []
        assert result.inferred_size == 0

    def test_negative_indices_kept(self, loader):
        """Test negative indices pass through for the forest to reject."""
        df = pd.DataFrame({"source": [-1], "target": [0]})
        result = loader.from_dataframe(df)
        assert result.edges == [(-1, 0)]
        assert result.inferred_size == 1

    def test_all_negative_indices_infer_empty(self, loader):
        """Test the inferred size never drops below zero."""
        df = pd.DataFrame({"source": [-5], "target": [-3]})
        result = loader.from_dataframe(df)
        assert result.edges == [(-5, -3)]
        assert result.inferred_size == 0
