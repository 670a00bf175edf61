# tests/tspatch/core/test_dictpath.py
from __future__ import annotations

import pytest

from tspatch.core.dictpath import getByPath


DATA = {"package": {"name": "typescript", "lib.dir": "lib"}, "flag": False}


@pytest.mark.parametrize(
    "path, expected",
    [
        ("package.name", "typescript"),
        ("package.lib\\.dir", "lib"),
        ("flag", False),
        ("package.missing", "default"),
        ("package..name", "default"),
        ("package.name.deeper", "default"),
        ("", "default"),
        ("trailing\\", "default"),
    ],
)
def test_getByPath(path, expected):
    assert getByPath(DATA, path, "default") == expected
