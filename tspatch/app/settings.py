# tspatch/app/settings.py
from __future__ import annotations
import json5, os
from pydantic import JsonValue
from pathlib import Path
from typing import Any, cast
from functools import lru_cache

from tspatch.core.constants import CONFIG_FILE_NAME, LIB_DIR_NAME
from tspatch.core.dictpath import getByPath

import logging
logger = logging.getLogger(__name__)

__all__ = [
    "SETTINGS", "SETTINGS_ENV_VAR", "userSettingsPath", "loadUserSettings",
    "loadSettings", "deepMerge", "settings", "settingsBool",
]


# Package identity (name, manifest file) is fixed in tspatch.core.constants.
SETTINGS_ENV_VAR = "TSPATCH_SETTINGS"
SETTINGS: JsonValue = {
    "__source": "TSPATCH_DEFAULTS",
    "package": {"libDir": LIB_DIR_NAME},
    "config": {"fileName": CONFIG_FILE_NAME},
    "debug": {"devModeEnabled": False},
    "logging": {"level": "INFO", "file": None},
}



def userSettingsPath() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override))
    return Path(os.path.expanduser("~/.tspatch/settings.json5"))



def loadUserSettings() -> JsonValue:
    """Parsed user settings file, or {} when it is missing or unusable."""
    filePath = userSettingsPath()
    if not filePath.is_file():
        return {}

    try:
        parsed = json5.loads(filePath.read_text(encoding="utf-8"))
    except Exception as err:
        logger.error("Failed to parse '%s': %s", filePath, err)
        return {}

    if not isinstance(parsed, dict):
        logger.error("Ignoring '%s': expected a JSON object, got '%s'", filePath, type(parsed).__name__)
        return {}
    return cast(JsonValue, parsed)



@lru_cache(maxsize=1)
def loadSettings() -> JsonValue:
    return deepMerge(SETTINGS, loadUserSettings())



def deepMerge(base: JsonValue, override: JsonValue) -> JsonValue:
    """
    Overlay `override` onto `base` without touching either.

    Objects merge key by key; any other value in `override` (list, scalar,
    null) replaces whatever `base` had.
    """
    if not (isinstance(base, dict) and isinstance(override, dict)):
        return override

    merged = dict(base)
    for key, value in override.items():
        merged[key] = deepMerge(base[key], value) if key in base else value
    return cast(JsonValue, merged)



def settings(path: str, default: Any = None) -> Any:
    """Dotted lookup into the merged settings; `default` when unset or null."""
    value = getByPath(loadSettings(), path)
    return default if value is None else value



def settingsBool(path: str, default: bool = False) -> bool:
    return bool(settings(path, default))
