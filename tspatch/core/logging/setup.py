# tspatch/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers
from os import PathLike

from tspatch.app.settings import settings, settingsBool
from .formatters import DevFormatter, JsonFormatter

__all__ = ["ROOT_LOGGER_NAME", "configureLogging", "getLogger"]



ROOT_LOGGER_NAME = "tspatch"



def configureLogging(
    *,
    verbose: bool = False,
    jsonFile: str | PathLike[str] | None = None,
) -> logging.Logger:
    """
    Configure the "tspatch" logger tree for a command-line host.

      - Console logs through DevFormatter (DEBUG when verbose or dev mode, else the
        configured "logging.level")
      - Optional JSON file log with rotation ("logging.file" setting or `jsonFile`)

    Library code never calls this; it only logs through module loggers.
    Calling it again replaces the handlers it installed before.
    """
    devMode = settingsBool("debug.devModeEnabled", False)
    if verbose or devMode:
        level = logging.DEBUG
    else:
        levelName = str(settings("logging.level", "INFO")).upper()
        level = getattr(logging, levelName, logging.INFO)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
    root.propagate = False

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(level)
    consoleHandler.setFormatter(DevFormatter())
    root.addHandler(consoleHandler)

    logFile = jsonFile if jsonFile is not None else settings("logging.file", None)
    if logFile:
        fileHandler = logging.handlers.RotatingFileHandler(
            logFile,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fileHandler.setLevel(level)
        fileHandler.setFormatter(JsonFormatter())
        root.addHandler(fileHandler)

    return root



def getLogger(name: str, side: str = "") -> logging.Logger:
    return logging.getLogger(f"{side}.{name}" if side else name)
