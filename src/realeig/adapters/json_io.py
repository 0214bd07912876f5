# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON matrix and decomposition I/O adapter.

Matrices are read either as a bare nested list or as an object with a
"matrix" key. Decompositions are written as plain JSON numbers, with
complex eigenvalues stored as [real, imag] pairs.
"""
import json
from typing import Any

from realeig.domain.eigen import EigenDecomposition
from realeig.ports import DecompositionWriter, MatrixReader


def _parse_rows(raw: Any) -> list[list[float]]:
    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise ValueError("Matrix must be a list of rows")
    try:
        return [[float(v) for v in row] for row in raw]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Matrix contains a non-numeric cell: {exc}") from exc


class JsonMatrixReader(MatrixReader):
    """Reads a matrix from a JSON file."""

    def read_matrix(self, path: str) -> list[list[float]]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if isinstance(data, dict):
            if 'matrix' not in data:
                raise ValueError("JSON object has no 'matrix' key")
            data = data['matrix']
        return _parse_rows(data)


def decomposition_to_dict(evd: EigenDecomposition) -> dict[str, Any]:
    """Plain-JSON representation of a decomposition."""
    return {
        'order': evd.order,
        'is_symmetric': evd.is_symmetric,
        'values': [[v.real, v.imag] for v in evd.values],
        'vectors': evd.vectors.tolist(),
        'd': evd.d.tolist(),
        'determinant': evd.determinant(),
        'rank': evd.rank(),
    }


class JsonDecompositionWriter(DecompositionWriter):
    """Writes a decomposition to a JSON file."""

    def write_decomposition(self, evd: EigenDecomposition, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(decomposition_to_dict(evd), f, indent=2)
