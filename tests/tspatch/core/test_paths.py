# tests/tspatch/core/test_paths.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tspatch.core.paths import getModuleAbsolutePath, isAbsolute, mkdirIfNotExist


@pytest.mark.parametrize(
    "filename, libDir, expected",
    [
        ("foo",           "/lib", Path("/lib/foo.js")),
        ("foo.js",        "/lib", Path("/lib/foo.js")),
        ("foo.ts",        "/lib", Path("/lib/foo.js")),
        ("tsc.d.ts",      "/lib", Path("/lib/tsc.d.js")),
        ("sub/server",    "/lib", Path("/lib/sub/server.js")),
        ("/abs/foo.ts",   "/lib", Path("/abs/foo.js")),
        ("/abs/foo.js",   "/lib", Path("/abs/foo.js")),
    ],
)
def test_getModuleAbsolutePath(filename, libDir, expected):
    assert getModuleAbsolutePath(filename, libDir) == expected


def test_getModuleAbsolutePath_acceptsPaths(tmp_path):
    assert getModuleAbsolutePath(Path("typescript"), tmp_path) == tmp_path / "typescript.js"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("lib/typescript.js", False),
        ("typescript", False),
    ],
)
def test_isAbsolute(path, expected):
    assert isAbsolute(path) is expected


def test_isAbsolute_hostAbsolutePath(tmp_path):
    assert isAbsolute(tmp_path) is True


@pytest.mark.skipif(sys.platform == "win32", reason="drive paths are absolute on Windows")
@pytest.mark.parametrize("filename", ["C:\\x\\foo.ts", "D:\\tsc"])
def test_windowsDrivePathsStayUnderLibDirOnPosix(filename):
    assert isAbsolute(filename) is False
    file = getModuleAbsolutePath(filename, "/lib")
    assert file.is_absolute()
    assert file.parent == Path("/lib")
    assert file.suffix == ".js"


def test_mkdirIfNotExist_createsNested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert mkdirIfNotExist(target) is True
    assert target.is_dir()


def test_mkdirIfNotExist_isIdempotent(tmp_path):
    target = tmp_path / "cache"
    mkdirIfNotExist(target)
    assert target.is_dir()

    assert mkdirIfNotExist(target) is False
    assert target.is_dir()
