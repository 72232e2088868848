"""FileCache — converted-file cache invalidated by source modification time."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from pathlib import Path
from typing import Any

from mtime_cache.cache.freshness import is_stale
from mtime_cache.cache.overlay import MemoryOverlay
from mtime_cache.cache.paths import resolve_entry_path
from mtime_cache.errors.exceptions import (
    CacheClearError,
    CacheInitError,
    CacheReadError,
    CacheWriteError,
)
from mtime_cache.reporting import LoggingReporter, Reporter
from mtime_cache.types import CacheOptions, CacheStats, WriteResult

logger = logging.getLogger(__name__)

# Lookup outcomes
_HIT = "hit"
_MISS = "miss"
_STALE = "stale"


class FileCache:
    """Disk cache of converted file contents, keyed by source path.

    Entries live at ``<cache_dir>/<namespace>/<path relative to base dir>``
    and are fresh as long as their mtime is not older than the source's.

    With ``keep_in_memory`` an overlay dict sits in front of the disk.
    Overlay entries are returned as-is until ``clear()``: they are NOT
    checked against the source mtime and go stale silently if the source
    changes while the process is running.

    ``add`` never raises on disk failures, it reports them and moves on.
    Callers must not assume an entry was persisted; use ``add_strict``
    when they need to know.

    Use ``init`` / ``init_async`` to construct; they make sure the cache
    dir exists.
    """

    def __init__(
        self,
        project_base_dir: str | Path,
        options: CacheOptions | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        options = options or CacheOptions()
        # Pin relative paths to the cwd at construction
        self._options = options.model_copy(update={"cache_dir": _absolute(options.cache_dir)})
        self._project_base_dir = _absolute(project_base_dir)
        self._storage_root = self._options.storage_root
        self._overlay = MemoryOverlay() if self._options.keep_in_memory else None
        self._reporter: Reporter = reporter or LoggingReporter()
        self._stats = CacheStats()

    # ── Construction ──

    @classmethod
    def init(
        cls,
        project_base_dir: str | Path,
        options: CacheOptions | None = None,
        reporter: Reporter | None = None,
    ) -> FileCache:
        """Create a cache, making sure its cache dir exists first."""
        options = options or CacheOptions()
        _ensure_cache_dir(options.cache_dir)
        return cls(project_base_dir, options, reporter)

    @classmethod
    async def init_async(
        cls,
        project_base_dir: str | Path,
        options: CacheOptions | None = None,
        reporter: Reporter | None = None,
    ) -> FileCache:
        """Async ``init``: the directory is created off the event loop."""
        options = options or CacheOptions()
        await asyncio.to_thread(_ensure_cache_dir, options.cache_dir)
        return cls(project_base_dir, options, reporter)

    @classmethod
    def from_config(
        cls,
        project_base_dir: str | Path,
        reporter: Reporter | None = None,
        **overrides: Any,
    ) -> FileCache:
        """Build options from the config hierarchy, then ``init``."""
        from mtime_cache.config.hierarchy import load_config_hierarchy

        config = load_config_hierarchy(**overrides)
        return cls.init(project_base_dir, CacheOptions.from_config(config), reporter)

    # ── Properties ──

    @property
    def project_base_dir(self) -> Path:
        return self._project_base_dir

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    @property
    def keep_in_memory(self) -> bool:
        return self._overlay is not None

    @property
    def options(self) -> CacheOptions:
        return self._options

    @property
    def stats(self) -> CacheStats:
        """Snapshot of the counters.

        Counters are only updated on the calling thread (the event loop for
        the async variants), never from the worker threads doing disk I/O.
        """
        return self._stats.model_copy()

    def entry_path(self, source_path: str | Path) -> Path:
        """Where the entry for ``source_path`` lives on disk."""
        return resolve_entry_path(
            self._project_base_dir,
            self._storage_root,
            source_path,
            strict=self._options.strict_paths,
        )

    # ── Lookup ──

    def get(self, source_path: str | Path, skip_staleness_check: bool = False) -> str | None:
        """Return cached content for ``source_path``, or None.

        Missing and stale entries both give None. With the overlay enabled
        a path already held in memory is returned without touching disk,
        and without comparing mtimes, even if the source changed since.

        Raises CacheReadError when an existing entry (or the source) cannot
        be stat-ed or read.
        """
        key = _key(source_path)
        if self._overlay is not None and key in self._overlay:
            return self._overlay_hit(key)

        entry = self.entry_path(source_path)
        outcome, content = _read_entry(source_path, entry, skip_staleness_check)
        return self._settle(key, entry, outcome, content)

    async def get_async(
        self, source_path: str | Path, skip_staleness_check: bool = False
    ) -> str | None:
        """``get`` with the stat and read calls run off the event loop."""
        key = _key(source_path)
        if self._overlay is not None and key in self._overlay:
            return self._overlay_hit(key)

        entry = self.entry_path(source_path)
        outcome, content = await asyncio.to_thread(
            _read_entry, source_path, entry, skip_staleness_check
        )
        return self._settle(key, entry, outcome, content)

    def is_fresh(self, source_path: str | Path) -> bool:
        """Whether a fresh entry exists on disk. Ignores the overlay."""
        entry = self.entry_path(source_path)
        if not os.path.exists(entry):
            return False
        try:
            return not is_stale(source_path, entry)
        except OSError as exc:
            raise CacheReadError(
                f"Failed to stat cache entry {entry}: {exc}",
                path=entry,
                original=exc,
            ) from exc

    # ── Store ──

    def add(self, source_path: str | Path, content: str) -> None:
        """Store ``content`` for ``source_path``.

        Disk failures are reported and swallowed; the overlay write (when
        enabled) always happens. With ``strict_paths`` a source outside the
        project base dir raises PathOutsideProjectError before anything is
        stored.
        """
        entry = self.entry_path(source_path)
        self._remember(source_path, content)
        self._record(_write_entry(entry, content))

    async def add_async(self, source_path: str | Path, content: str) -> None:
        """Async ``add``: same outcome, the disk write runs off the event loop."""
        entry = self.entry_path(source_path)
        self._remember(source_path, content)
        self._record(await asyncio.to_thread(_write_entry, entry, content))

    def add_strict(self, source_path: str | Path, content: str) -> None:
        """Like ``add`` but raises CacheWriteError when the disk write fails."""
        entry = self.entry_path(source_path)
        self._remember(source_path, content)
        _raise_for_result(self._record(_write_entry(entry, content)))

    async def add_strict_async(self, source_path: str | Path, content: str) -> None:
        entry = self.entry_path(source_path)
        self._remember(source_path, content)
        result = await asyncio.to_thread(_write_entry, entry, content)
        _raise_for_result(self._record(result))

    # ── Clear ──

    def clear(self) -> None:
        """Drop the overlay and delete every entry on disk.

        A missing storage root is fine. Other removal errors raise
        CacheClearError.
        """
        if self._overlay is not None:
            self._overlay.clear()
        _remove_tree(self._storage_root)
        self._reporter.report("cache.cleared", root=self._storage_root)

    async def clear_async(self) -> None:
        if self._overlay is not None:
            self._overlay.clear()
        await asyncio.to_thread(_remove_tree, self._storage_root)
        self._reporter.report("cache.cleared", root=self._storage_root)

    # ── Internals ──

    def _remember(self, source_path: str | Path, content: str) -> None:
        if self._overlay is not None:
            self._overlay.set(_key(source_path), content)

    def _overlay_hit(self, key: str) -> str | None:
        self._stats.overlay_hits += 1
        self._reporter.report("cache.overlay_hit", source=key)
        return self._overlay.get(key) if self._overlay is not None else None

    def _settle(self, key: str, entry: Path, outcome: str, content: str | None) -> str | None:
        if outcome == _MISS:
            self._stats.misses += 1
            self._reporter.report("cache.miss", source=key)
            return None
        if outcome == _STALE:
            self._stats.stale += 1
            self._reporter.report("cache.stale", source=key, entry=entry)
            return None

        if self._overlay is not None and content is not None:
            self._overlay.set(key, content)
        self._stats.hits += 1
        self._reporter.report("cache.hit", source=key, entry=entry)
        return content

    def _record(self, result: WriteResult) -> WriteResult:
        if result.ok:
            self._stats.writes += 1
            self._reporter.report("cache.write", entry=result.path)
        else:
            self._stats.write_failures += 1
            self._reporter.report("cache.write_failed", entry=result.path, error=result.error)
        return result


def _key(source_path: str | Path) -> str:
    return os.path.abspath(os.fspath(source_path))


def _absolute(path: str | Path) -> Path:
    return Path(os.path.abspath(os.fspath(path)))


def _read_entry(
    source_path: str | Path, entry: Path, skip_staleness_check: bool
) -> tuple[str, str | None]:
    """Disk half of a lookup. Touches no cache state, safe off the loop."""
    if not os.path.exists(entry):
        return _MISS, None
    try:
        if not skip_staleness_check and is_stale(source_path, entry):
            return _STALE, None
        with open(entry, encoding="utf-8", newline="") as f:
            return _HIT, f.read()
    except OSError as exc:
        raise CacheReadError(
            f"Failed to read cache entry {entry}: {exc}",
            path=entry,
            original=exc,
        ) from exc


def _ensure_cache_dir(cache_dir: Path) -> None:
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheInitError(
            f"Cannot create cache directory {cache_dir}: {exc}",
            path=cache_dir,
            original=exc,
        ) from exc


def _write_entry(entry: Path, content: str) -> WriteResult:
    try:
        entry.parent.mkdir(parents=True, exist_ok=True)
        with open(entry, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        return WriteResult(path=entry, ok=False, error=str(exc), original=exc)
    return WriteResult(path=entry)


def _raise_for_result(result: WriteResult) -> None:
    if not result.ok:
        raise CacheWriteError(
            f"Failed to write cache entry {result.path}: {result.error}",
            path=result.path,
            original=result.original,
        ) from result.original


def _remove_tree(root: Path) -> None:
    try:
        shutil.rmtree(root)
    except FileNotFoundError:
        logger.debug("Storage root %s does not exist, nothing to clear", root)
    except OSError as exc:
        raise CacheClearError(
            f"Failed to remove cache storage {root}: {exc}",
            path=root,
            original=exc,
        ) from exc
