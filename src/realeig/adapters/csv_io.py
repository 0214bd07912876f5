# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV matrix reader.

One matrix row per line, comma separated. External dependencies
(csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from realeig.ports import MatrixReader

logger = logging.getLogger(__name__)


class CsvMatrixReader(MatrixReader):
    """Reads a matrix from a CSV file."""

    def read_matrix(self, path: str) -> list[list[float]]:
        rows: list[list[float]] = []
        skipped = 0
        with open(path, newline='', encoding='utf-8') as f:
            for line_no, record in enumerate(csv.reader(f), start=1):
                cells = [c.strip() for c in record]
                if not any(cells):
                    skipped += 1
                    continue
                try:
                    rows.append([float(c) for c in cells])
                except ValueError as exc:
                    raise ValueError(f"{path}:{line_no}: non-numeric cell ({exc})") from exc
        if skipped:
            logger.warning("Skipped %d blank line(s) in %s", skipped, path)
        return rows
