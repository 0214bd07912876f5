# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Domain modules stay free of I/O and third-party imports beyond numpy."""
import ast
from pathlib import Path

import pytest

DOMAIN_ROOT = Path(__file__).resolve().parent.parent / "src" / "realeig" / "domain"

ALLOWED = {
    "math", "numpy", "dataclasses", "functools", "logging", "typing",
    "realeig", "__future__",
}


def _imported_tops(path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            yield node.module.split(".")[0]
        elif isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name.split(".")[0]


@pytest.mark.parametrize(
    "path", sorted(DOMAIN_ROOT.glob("*.py")), ids=lambda p: p.name,
)
def test_domain_module_pure(path):
    for top in _imported_tops(path):
        assert top in ALLOWED, f"Forbidden import in {path.name}: {top}"
