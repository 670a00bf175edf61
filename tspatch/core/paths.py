# tspatch/core/paths.py
from __future__ import annotations
import logging
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["isAbsolute", "getModuleAbsolutePath", "mkdirIfNotExist"]



def isAbsolute(path: str | PathLike[str]) -> bool:
    """True when `path` is absolute on the host platform."""
    return Path(path).is_absolute()



def getModuleAbsolutePath(filename: str | PathLike[str], libDir: str | PathLike[str]) -> Path:
    """
    Returns the path of a module file.

    Names that are not absolute on this host go under `libDir`. The extension is always
    normalized to `.js`:
        ("foo", "/lib")         -> /lib/foo.js
        ("/abs/foo.ts", "/lib") -> /abs/foo.js
    """
    file = Path(filename) if isAbsolute(filename) else Path(libDir) / filename
    if file.suffix != ".js":
        file = file.with_name(f"{file.stem}.js")
    return file



def mkdirIfNotExist(dir: str | PathLike[str]) -> bool:
    """Creates `dir` (with parents) when missing. Returns True if it was created."""
    path = Path(dir)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory '%s'", path)
    return True
