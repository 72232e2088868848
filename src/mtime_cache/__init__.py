"""mtime-cache — cache converted files until their source changes."""

from mtime_cache.cache import FileCache
from mtime_cache.errors import (
    CacheClearError,
    CacheInitError,
    CacheReadError,
    CacheWriteError,
    FileCacheError,
    PathOutsideProjectError,
)
from mtime_cache.reporting import LoggingReporter, Reporter
from mtime_cache.types import DEFAULT_NAMESPACE, CacheOptions, CacheStats, WriteResult

__all__ = [
    "FileCache",
    "CacheOptions",
    "CacheStats",
    "WriteResult",
    "DEFAULT_NAMESPACE",
    "Reporter",
    "LoggingReporter",
    "FileCacheError",
    "CacheInitError",
    "CacheReadError",
    "CacheWriteError",
    "CacheClearError",
    "PathOutsideProjectError",
]
