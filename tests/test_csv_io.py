# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for adapters/csv_io.py."""
import logging

import pytest

from realeig.adapters.csv_io import CsvMatrixReader


class TestCsvMatrixReader:
    def test_reads_rows(self, tmp_path):
        path = tmp_path / "m.csv"
        path.write_text("1,2,3\n4, 5 ,6\n7,8,9.5\n", encoding="utf-8")
        rows = CsvMatrixReader().read_matrix(str(path))
        assert rows == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.5]]

    def test_blank_lines_skipped_with_warning(self, tmp_path, caplog):
        path = tmp_path / "m.csv"
        path.write_text("1,0\n\n0,1\n\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="realeig.adapters.csv_io"):
            rows = CsvMatrixReader().read_matrix(str(path))
        assert rows == [[1.0, 0.0], [0.0, 1.0]]
        assert any("Skipped 2 blank" in r.getMessage() for r in caplog.records)

    def test_non_numeric_reports_line(self, tmp_path):
        path = tmp_path / "m.csv"
        path.write_text("1,2\nthree,4\n", encoding="utf-8")
        with pytest.raises(ValueError, match=":2: non-numeric"):
            CsvMatrixReader().read_matrix(str(path))

    def test_scientific_notation(self, tmp_path):
        path = tmp_path / "m.csv"
        path.write_text("1e-3,-2E2\n", encoding="utf-8")
        assert CsvMatrixReader().read_matrix(str(path)) == [[0.001, -200.0]]
