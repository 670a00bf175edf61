# tspatch/config/patch_config.py
from __future__ import annotations
import logging
import os
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any, Callable

import json5
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from tspatch.app.settings import settings
from tspatch.core.constants import CONFIG_FILE_NAME, TOOL_VERSION
from tspatch.core.errors import FileWriteError

logger = logging.getLogger(__name__)

__all__ = ["PatchConfig", "configFilePath", "mergeConfigData", "loadPatchConfig"]



class PatchConfig(BaseModel):
    """
    Persisted record of prior patch operations for one package directory.

    `file` and `version` are fixed once the config is built; `persist` and
    `modules` are for callers to change before calling save().
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    file: Path = Field(frozen=True, exclude=True)
    version: str = Field(default=TOOL_VERSION, frozen=True)
    persist: bool = False
    modules: dict[str, int | float] = Field(default_factory=dict)

    def toData(self) -> dict[str, Any]:
        """The JSON document written to `file`."""
        return {
            "version": self.version,
            "persist": self.persist,
            "modules": dict(self.modules),
        }

    def save(self) -> None:
        """
        Overwrite `file` with the current state.

        The document goes to a sibling temp file first and is then moved over
        the target. Any failure is raised as FileWriteError.
        """
        tmpPath = self.file.with_name(self.file.name + ".tmp")
        try:
            out = json5.dumps(self.toData(), indent=2, quote_keys=True, trailing_commas=False)
            with open(tmpPath, "w", encoding="utf-8") as fl:
                fl.write(out)
                fl.write("\n")
            os.replace(tmpPath, self.file)
        except (OSError, TypeError, ValueError) as err:
            try:
                tmpPath.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file '%s'", tmpPath)
            raise FileWriteError(self.file, str(err)) from err

        logger.debug("Saved patch config (%d modules) to '%s'", len(self.modules), self.file)



def configFilePath(packageDir: str | PathLike[str]) -> Path:
    return Path(packageDir) / settings("config.fileName", CONFIG_FILE_NAME)



_PERSIST_ADAPTER: TypeAdapter[bool] = TypeAdapter(bool)
_MODULE_STATE_ADAPTER: TypeAdapter[int | float] = TypeAdapter(int | float)



def mergeConfigData(
    fileData: Mapping[str, Any],
    file: Path,
    *,
    report: Callable[..., None] = logger.debug,
) -> dict[str, Any]:
    """
    Build PatchConfig fields from defaults overlaid with loaded data.

    Recognized keys are persist, modules and version; anything else is dropped.
    A value of the wrong type falls back to its default on its own, and a bad
    `modules` entry drops only that entry, so the rest of the patch state
    survives. `file` is always `file`.
    """
    merged: dict[str, Any] = {"persist": False, "modules": {}, "version": TOOL_VERSION, "file": file}

    for key, value in fileData.items():
        if key == "persist":
            try:
                merged["persist"] = _PERSIST_ADAPTER.validate_python(value)
            except ValidationError:
                report("Ignoring invalid 'persist' value %r in '%s'", value, file)

        elif key == "modules":
            if not isinstance(value, Mapping):
                report("Ignoring 'modules' in '%s': expected an object, got '%s'", file, type(value).__name__)
                continue
            modules: dict[str, int | float] = {}
            for moduleId, state in value.items():
                try:
                    modules[str(moduleId)] = _MODULE_STATE_ADAPTER.validate_python(state)
                except ValidationError:
                    report("Ignoring module '%s' in '%s': %r is not a number", moduleId, file, state)
            merged["modules"] = modules

        elif key == "version":
            if isinstance(value, str) and value:
                merged["version"] = value
            elif value:
                report("Ignoring invalid 'version' value %r in '%s'", value, file)

        else:
            logger.debug("Ignoring unknown key '%s' in '%s'", key, file)

    return merged



def _readConfigFile(configFile: Path) -> Mapping[str, Any]:
    parsed = json5.loads(configFile.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise TypeError(f"expected a JSON object, got '{type(parsed).__name__}'")
    return parsed



def loadPatchConfig(packageDir: str | PathLike[str], *, isCli: bool = False) -> PatchConfig:
    """
    Load the patch config for `packageDir`.

    A missing file gives the defaults. A file that cannot be read or parsed,
    and any field with a bad value, is reported (warning when `isCli`, debug
    otherwise) and replaced by defaults; this never raises for bad file content.
    """
    configFile = configFilePath(packageDir)
    report = logger.warning if isCli else logger.debug

    fileData: Mapping[str, Any] = {}
    if configFile.exists():
        try:
            fileData = _readConfigFile(configFile)
        except Exception as err:
            report("Could not load patch config '%s': %s", configFile, err)
            fileData = {}

    return PatchConfig.model_validate(mergeConfigData(fileData, configFile, report=report))
