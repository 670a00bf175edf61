# tspatch/packages/locator.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import json5
from pydantic import ValidationError

from tspatch.app.settings import settings
from tspatch.config.patch_config import PatchConfig, loadPatchConfig
from tspatch.core.constants import (
    LIB_DIR_NAME,
    MANIFEST_FILE_NAME,
    NODE_MODULES_DIR,
    TS_PACKAGE_NAME,
)
from tspatch.core.errors import PackageError
from tspatch.packages.manifest import PackageManifest

logger = logging.getLogger(__name__)

__all__ = ["PackageDescriptor", "nodeModulesPaths", "resolvePackageDir", "resolvePackage"]



@dataclass(slots=True)
class PackageDescriptor:
    """A located and validated TypeScript installation."""
    version: str | None
    manifestFile: Path
    packageDir: Path
    config: PatchConfig
    libDir: Path



def nodeModulesPaths(baseDir: Path) -> list[Path]:
    """
    Candidate node_modules directories for `baseDir`, nearest first.

    Follows node's lookup: every ancestor contributes `<dir>/node_modules`,
    except directories that already are a node_modules folder.
    """
    dirs: list[Path] = []
    for parent in (baseDir, *baseDir.parents):
        if parent.name == NODE_MODULES_DIR:
            continue
        dirs.append(parent / NODE_MODULES_DIR)
    return dirs



def resolvePackageDir(baseDir: str | PathLike[str], packageName: str | None = None) -> Path | None:
    """
    Returns the directory of the first `<node_modules>/<packageName>/package.json`
    reachable from `baseDir`, or None.
    """
    packageName = packageName or TS_PACKAGE_NAME
    base = Path(os.path.abspath(baseDir))

    for modulesDir in nodeModulesPaths(base):
        candidate = modulesDir / packageName / MANIFEST_FILE_NAME
        if candidate.is_file():
            logger.debug("Resolved '%s' from '%s' at '%s'", packageName, base, candidate.parent)
            return candidate.parent
    return None



def _readManifest(manifestFile: Path) -> PackageManifest:
    try:
        raw = json5.loads(manifestFile.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise TypeError(f"expected a JSON object, got '{type(raw).__name__}'")
        return PackageManifest.model_validate(raw)
    except (OSError, ValueError, TypeError, ValidationError) as err:
        raise PackageError(f"Could not parse json data in {manifestFile}", path=manifestFile) from err



def resolvePackage(baseDir: str | PathLike[str] | None = None, *, isCli: bool = False) -> PackageDescriptor:
    """
    Resolve the TypeScript package visible from `baseDir` (default: cwd).

    The expected package name is always TS_PACKAGE_NAME; only the lib dir
    and patch config file name follow user settings.

    Raises:
        PackageError: `baseDir` is not a directory, no package was found, its
            package.json cannot be parsed, or it names a different package.
    """
    base = Path(os.path.abspath(baseDir if baseDir is not None else os.getcwd()))
    if not base.is_dir():
        raise PackageError(f"{base} is not a valid directory", path=base)

    expectedName = TS_PACKAGE_NAME
    packageDir = resolvePackageDir(base, expectedName)
    if packageDir is None:
        raise PackageError(f"Could not find {expectedName} package in {base}", path=base)

    manifestFile = packageDir / MANIFEST_FILE_NAME
    manifest = _readManifest(manifestFile)

    if manifest.name != expectedName:
        raise PackageError(
            f"The package in {packageDir} is not {expectedName}. Found: {manifest.name}.",
            path=packageDir,
        )

    return PackageDescriptor(
        version=manifest.version,
        manifestFile=manifestFile,
        packageDir=packageDir,
        config=loadPatchConfig(packageDir, isCli=isCli),
        libDir=packageDir / settings("package.libDir", LIB_DIR_NAME),
    )
