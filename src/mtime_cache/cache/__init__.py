"""Cache subsystem — disk entries mirrored from the source tree, plus an optional overlay."""

from mtime_cache.cache.file_cache import FileCache
from mtime_cache.cache.freshness import is_stale
from mtime_cache.cache.overlay import MemoryOverlay
from mtime_cache.cache.paths import resolve_entry_path

__all__ = [
    "FileCache",
    "MemoryOverlay",
    "is_stale",
    "resolve_entry_path",
]
