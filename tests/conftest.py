import os
from pathlib import Path

import pytest

from mtime_cache.cache.file_cache import FileCache
from mtime_cache.types import CacheOptions

_FIXTURE_FILES = ("a/aa/foo.ts", "a/aa/bar.ts", "a/ab/foo.ts")


def touch(path: Path, advance_seconds: float = 5.0) -> None:
    """Rewrite a file unchanged and push its mtime forward.

    Pushing the mtime explicitly keeps staleness tests independent of the
    filesystem's timestamp granularity.
    """
    path.write_text(path.read_text())
    st = path.stat()
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + int(advance_seconds * 1e9)))


@pytest.fixture
def fixtures(tmp_path) -> Path:
    """Source tree where every file holds a comment with its relative path."""
    root = tmp_path / "fixtures"
    for rel in _FIXTURE_FILES:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"// {rel}\n")
    return root


@pytest.fixture
def cache_dir(tmp_path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def cache(fixtures, cache_dir) -> FileCache:
    return FileCache.init(fixtures, CacheOptions(cache_dir=cache_dir))


@pytest.fixture
def overlay_cache(fixtures, cache_dir) -> FileCache:
    return FileCache.init(fixtures, CacheOptions(cache_dir=cache_dir, keep_in_memory=True))


@pytest.fixture
def touch_source():
    return touch
