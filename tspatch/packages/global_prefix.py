# tspatch/packages/global_prefix.py
from __future__ import annotations

import logging
import os
import re
import shutil
import sys
from collections.abc import Mapping
from os import PathLike
from pathlib import Path

from tspatch.core.errors import PackageError
from tspatch.packages.locator import resolvePackage

logger = logging.getLogger(__name__)

__all__ = ["readNpmrcPrefix", "getGlobalPrefix", "resolveGlobalPackageDir"]



_NPMRC_PREFIX_RE = re.compile(r"^\s*prefix\s*=\s*(?P<value>.+?)\s*$", re.MULTILINE)
_ENV_REF_RE = re.compile(r"\$\{([^}]+)\}")



def _expand(value: str, env: Mapping[str, str]) -> str:
    value = value.strip().strip("\"'")
    value = _ENV_REF_RE.sub(lambda match: env.get(match.group(1), ""), value)
    if value.startswith("~"):
        home = env.get("HOME") or env.get("USERPROFILE") or os.path.expanduser("~")
        value = home + value[1:]
    return value



def readNpmrcPrefix(npmrc: Path, env: Mapping[str, str]) -> str | None:
    """Returns the expanded `prefix=` value of an .npmrc file, if any."""
    if not npmrc.is_file():
        return None
    try:
        text = npmrc.read_text(encoding="utf-8")
    except OSError as err:
        logger.debug("Could not read '%s': %s", npmrc, err)
        return None

    match = _NPMRC_PREFIX_RE.search(text)
    if match is None:
        return None
    return _expand(match.group("value"), env) or None



def getGlobalPrefix(env: Mapping[str, str] | None = None) -> Path:
    """
    Returns npm's global installation prefix.

    Lookup order:
      1) PREFIX / npm_config_prefix environment variables
      2) prefix= in the user .npmrc (NPM_CONFIG_USERCONFIG or ~/.npmrc)
      3) %APPDATA%/npm on Windows
      4) the directory above the folder holding the node executable
      5) /usr/local
    """
    env = os.environ if env is None else env

    for key in ("PREFIX", "npm_config_prefix", "NPM_CONFIG_PREFIX"):
        value = env.get(key)
        if value:
            return Path(_expand(value, env))

    home = env.get("HOME") or env.get("USERPROFILE") or os.path.expanduser("~")
    userConfig = env.get("NPM_CONFIG_USERCONFIG") or env.get("npm_config_userconfig")
    npmrc = Path(_expand(userConfig, env)) if userConfig else Path(home) / ".npmrc"
    prefix = readNpmrcPrefix(npmrc, env)
    if prefix:
        return Path(prefix)

    if sys.platform == "win32" and env.get("APPDATA"):
        return Path(env["APPDATA"]) / "npm"

    nodeExe = shutil.which("node", path=env.get("PATH"))
    if nodeExe:
        nodeDir = Path(os.path.realpath(nodeExe)).parent
        return nodeDir if sys.platform == "win32" else nodeDir.parent

    return Path("/usr/local")



def resolveGlobalPackageDir(prefix: str | PathLike[str] | None = None) -> Path:
    """
    Locate the globally installed TypeScript package directory.

    Both `<prefix>` and `<prefix>/lib` are tried since the global layout
    differs between npm versions and platforms. The errors from every attempt
    are kept on the raised PackageError as `causes`.
    """
    basedir = Path(prefix) if prefix is not None else getGlobalPrefix()
    errors: list[PackageError] = []

    for candidate in (basedir, basedir / "lib"):
        try:
            return resolvePackage(candidate).packageDir
        except PackageError as err:
            logger.debug("No global TypeScript under '%s': %s", candidate, err)
            errors.append(err)

    raise PackageError(
        "Could not find global TypeScript installation! Are you sure it's installed globally?",
        path=basedir,
        causes=errors,
    ) from errors[-1]
