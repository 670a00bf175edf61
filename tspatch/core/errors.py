# tspatch/core/errors.py
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

__all__ = ["TspError", "PackageError", "FileNotFound", "FileWriteError"]



class TspError(Exception):
    """Base class for every error raised across the tspatch boundary."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None



class PackageError(TspError):
    """
    Package resolution or validation failed.

    `causes` holds the underlying per-candidate failures when several locations
    were probed (see resolveGlobalPackageDir); it is empty otherwise.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        causes: Iterable[BaseException] = (),
    ) -> None:
        super().__init__(message, path=path)
        self.causes: tuple[BaseException, ...] = tuple(causes)



class FileNotFound(TspError, FileNotFoundError):
    """A requested module file does not exist."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        TspError.__init__(self, message, path=path)

    def __str__(self) -> str:
        return self.message



class FileWriteError(TspError, OSError):
    """The patch config could not be written; wraps the underlying I/O message."""

    def __init__(self, file: str | Path, message: str) -> None:
        TspError.__init__(self, f"Error while trying to write to {file}: {message}", path=file)
        self.reason: str = message

    def __str__(self) -> str:
        return self.message
