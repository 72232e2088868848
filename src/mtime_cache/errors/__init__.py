"""Error handling — exception hierarchy for cache failures."""

from mtime_cache.errors.exceptions import (
    CacheClearError,
    CacheInitError,
    CacheReadError,
    CacheWriteError,
    FileCacheError,
    PathOutsideProjectError,
)

__all__ = [
    "FileCacheError",
    "CacheInitError",
    "CacheReadError",
    "CacheWriteError",
    "CacheClearError",
    "PathOutsideProjectError",
]
