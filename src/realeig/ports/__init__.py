# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for matrix and decomposition file I/O.

Adapters implement these to handle different file formats.
"""
from abc import ABC, abstractmethod

from realeig.domain.eigen import EigenDecomposition


class MatrixReader(ABC):
    """Port for reading a square matrix from a file."""

    @abstractmethod
    def read_matrix(self, path: str) -> list[list[float]]:
        """Read and parse a matrix, one inner list per row."""
        ...


class DecompositionWriter(ABC):
    """Port for writing an eigenvalue decomposition to a file."""

    @abstractmethod
    def write_decomposition(self, evd: EigenDecomposition, path: str) -> None:
        """Serialize the decomposition to the given path."""
        ...
