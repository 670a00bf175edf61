# tspatch/core/dictpath.py
from __future__ import annotations
from typing import Any
from collections.abc import Mapping

__all__ = ["getByPath"]



def _splitPath(path: str) -> list[str]:
    """
    Splits a dotted path; backslash escapes the next character.

    Examples:
      - package.name   -> ["package", "name"]
      - a\\.b.c        -> ["a.b", "c"]
    """
    parts: list[str] = []
    curr: list[str] = []
    esc = False
    for ch in path:
        if esc:
            curr.append(ch)
            esc = False
            continue
        if ch == "\\":
            esc = True
            continue
        if ch == ".":
            parts.append("".join(curr))
            curr = []
            continue
        curr.append(ch)
    if esc:
        raise ValueError("Path ends with a dangling escape (trailing backslash)")
    parts.append("".join(curr))
    if any(part == "" for part in parts):
        raise ValueError(f"Path '{path}' contains empty segment(s)")
    return parts



def getByPath(obj: Any, path: str, default: Any | None = None) -> Any:
    """
    Returns the value at dotted `path` inside nested mappings, or `default`
    when any hop is missing or the path is malformed.
    """
    if not isinstance(path, str) or not path:
        return default
    try:
        parts = _splitPath(path)
    except ValueError:
        return default

    current: Any = obj
    for part in parts:
        if isinstance(current, Mapping) and part in current:
            current = current[part]
            continue
        return default
    return current
