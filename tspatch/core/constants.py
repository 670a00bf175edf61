# tspatch/core/constants.py
from __future__ import annotations

__all__ = [
    "TOOL_VERSION", "TS_PACKAGE_NAME", "MANIFEST_FILE_NAME",
    "LIB_DIR_NAME", "CONFIG_FILE_NAME", "NODE_MODULES_DIR",
]



# Version written into new patch configs when the file does not carry one.
TOOL_VERSION = "0.1.0"

# Fallbacks for tspatch.app.settings; user settings may override these.
TS_PACKAGE_NAME = "typescript"
MANIFEST_FILE_NAME = "package.json"
LIB_DIR_NAME = "lib"
CONFIG_FILE_NAME = "ts-patch.json"

NODE_MODULES_DIR = "node_modules"
