"""Tests for custom exception hierarchy."""

from pathlib import Path

from mtime_cache.errors.exceptions import (
    CacheClearError,
    CacheInitError,
    CacheReadError,
    CacheWriteError,
    FileCacheError,
    PathOutsideProjectError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        for cls in (
            CacheInitError,
            CacheReadError,
            CacheWriteError,
            CacheClearError,
            PathOutsideProjectError,
        ):
            assert issubclass(cls, FileCacheError)

    def test_all_inherit_from_exception(self):
        assert issubclass(FileCacheError, Exception)

    def test_io_errors_are_distinct(self):
        assert not issubclass(CacheReadError, CacheWriteError)
        assert not issubclass(CacheClearError, CacheReadError)


class TestFilesystemErrors:
    def test_attributes(self):
        original = PermissionError("denied")
        err = CacheReadError("Cannot read", path=Path("/c/a.ts"), original=original)
        assert err.message == "Cannot read"
        assert err.path == Path("/c/a.ts")
        assert err.original is original
        assert "Cannot read" in str(err)

    def test_defaults(self):
        err = CacheClearError("boom")
        assert err.path is None
        assert err.original is None


class TestPathOutsideProjectError:
    def test_attributes(self):
        err = PathOutsideProjectError(
            "outside", source_path=Path("/elsewhere/a.ts"), base_dir=Path("/project")
        )
        assert err.source_path == Path("/elsewhere/a.ts")
        assert err.base_dir == Path("/project")
        assert err.message == "outside"
