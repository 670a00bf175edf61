# tspatch/modules/inspector.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Literal

from tspatch.core.errors import FileNotFound

logger = logging.getLogger(__name__)

__all__ = [
    "MODULE_SIGNATURE_VERSION",
    "MODULE_SIGNATURE",
    "VERSION_MARKER",
    "ModuleDescriptor",
    "inspectModule",
]



# Shape of TypeScript's namespace-wrapped lib output:
#   (function (ts) { ... })(ts || (ts = {}));
# Bump MODULE_SIGNATURE_VERSION whenever either pattern changes.
MODULE_SIGNATURE_VERSION = 1
MODULE_SIGNATURE = re.compile(
    r"^\(function\s\(ts\)\s?{[\s\S]+?\(ts\s?\|\|\s?\(ts\s?=\s?{}\)\);?$",
    re.MULTILINE,
)
VERSION_MARKER = re.compile(
    r"^\s*?var\stspVersion\s?=\s?['\"`](?P<version>\S+?)['\"`]",
    re.MULTILINE,
)



@dataclass(slots=True)
class ModuleDescriptor:
    """
    Result of inspecting one module file.

    patchVersion:
      - str   -> patchable and carries a tspVersion marker
      - False -> patchable but no marker found
      - None  -> not patchable
    """
    file: Path
    filename: str
    dir: Path
    canPatch: bool
    patchVersion: str | Literal[False] | None = None
    moduleSrc: str | None = None



def inspectModule(file: str | PathLike[str], includeSource: bool = False) -> ModuleDescriptor:
    """
    Read `file` and report whether it can be patched.

    `moduleSrc` is only attached when `includeSource` is set and the module is
    patchable.

    Raises:
        FileNotFound: `file` does not exist.
    """
    path = Path(file)
    if not path.is_file():
        raise FileNotFound(f"Could not find file {path}.", path=path)

    # Undecodable bytes become U+FFFD rather than failing the inspection.
    fileData = path.read_text(encoding="utf-8", errors="replace")
    canPatch = MODULE_SIGNATURE.search(fileData) is not None

    patchVersion: str | Literal[False] | None = None
    if canPatch:
        match = VERSION_MARKER.search(fileData)
        if match is not None:
            patchVersion = match.group("version")
        else:
            logger.debug("No tspVersion marker in patchable module '%s'", path)
            patchVersion = False

    return ModuleDescriptor(
        file=path,
        filename=path.name,
        dir=path.parent,
        canPatch=canPatch,
        patchVersion=patchVersion,
        moduleSrc=fileData if includeSource and canPatch else None,
    )
