"""Custom exception hierarchy for mtime-cache."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FileCacheError(Exception):
    """Base exception for all mtime-cache errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class _FilesystemError(FileCacheError):
    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original


class CacheInitError(_FilesystemError):
    """The cache directory could not be created. Fatal to construction."""


class CacheReadError(_FilesystemError):
    """Stat or read failed on an entry that is known to exist.

    Distinct from a miss: a missing or stale entry is a normal ``None``
    result, this signals a real filesystem or permission problem.
    """


class CacheWriteError(_FilesystemError):
    """Persisting an entry failed. Only raised by the strict add variants."""


class CacheClearError(_FilesystemError):
    """Removing the storage root failed for a reason other than absence."""


class PathOutsideProjectError(FileCacheError):
    """Source path does not live under the project base dir (strict mode)."""

    def __init__(
        self,
        message: str = "",
        source_path: Path | None = None,
        base_dir: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.source_path = source_path
        self.base_dir = base_dir
