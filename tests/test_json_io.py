# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for adapters/json_io.py."""
import json

import pytest

from realeig.adapters.json_io import (
    JsonDecompositionWriter,
    JsonMatrixReader,
    decomposition_to_dict,
)
from realeig.domain.eigen import eigen_decompose
from realeig.ports import DecompositionWriter, MatrixReader


class TestJsonMatrixReader:
    def test_nested_list(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text("[[1, 2], [3, 4.5]]", encoding="utf-8")
        assert JsonMatrixReader().read_matrix(str(path)) == [[1.0, 2.0], [3.0, 4.5]]

    def test_matrix_key(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"name": "rot", "matrix": [[0, -1], [1, 0]]}), encoding="utf-8")
        assert JsonMatrixReader().read_matrix(str(path)) == [[0.0, -1.0], [1.0, 0.0]]

    def test_missing_key(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text('{"rows": []}', encoding="utf-8")
        with pytest.raises(ValueError, match="'matrix'"):
            JsonMatrixReader().read_matrix(str(path))

    def test_not_a_list_of_rows(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError, match="list of rows"):
            JsonMatrixReader().read_matrix(str(path))

    def test_non_numeric_cell(self, tmp_path):
        path = tmp_path / "m.json"
        path.write_text('[[1, "x"], [3, 4]]', encoding="utf-8")
        with pytest.raises(ValueError, match="non-numeric"):
            JsonMatrixReader().read_matrix(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonMatrixReader().read_matrix(str(tmp_path / "absent.json"))

    def test_implements_port(self):
        assert isinstance(JsonMatrixReader(), MatrixReader)


class TestJsonDecompositionWriter:
    def test_dict_layout(self):
        evd = eigen_decompose([[0.0, -1.0], [1.0, 0.0]])
        data = decomposition_to_dict(evd)
        assert data["order"] == 2
        assert data["is_symmetric"] is False
        assert len(data["values"]) == 2
        assert abs(data["values"][0][1] - 1.0) < 1e-12
        assert abs(data["values"][1][1] + 1.0) < 1e-12
        assert data["rank"] == 2
        assert abs(data["determinant"] - 1.0) < 1e-12
        assert len(data["vectors"]) == 2
        assert len(data["d"]) == 2

    def test_written_file_is_json(self, tmp_path):
        evd = eigen_decompose([[2.0, -1.0], [-1.0, 2.0]])
        path = tmp_path / "evd.json"
        JsonDecompositionWriter().write_decomposition(evd, str(path))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["is_symmetric"] is True
        assert [v[0] for v in data["values"]] == pytest.approx([1.0, 3.0])
        assert data["determinant"] == pytest.approx(3.0)

    def test_implements_port(self):
        assert isinstance(JsonDecompositionWriter(), DecompositionWriter)
