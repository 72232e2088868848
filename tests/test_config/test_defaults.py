"""Tests for package defaults."""

import tempfile

from mtime_cache.config.defaults import (
    DEFAULT_CACHE_DIR,
    DEFAULT_KEEP_IN_MEMORY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_PATHS,
    get_defaults,
)


class TestDefaults:
    def test_default_cache_dir_is_temp(self):
        assert DEFAULT_CACHE_DIR == tempfile.gettempdir()

    def test_overlay_off_by_default(self):
        assert DEFAULT_KEEP_IN_MEMORY is False

    def test_strict_paths_off_by_default(self):
        assert DEFAULT_STRICT_PATHS is False

    def test_default_log_level(self):
        assert DEFAULT_LOG_LEVEL == "WARNING"

    def test_get_defaults_has_all_keys(self):
        d = get_defaults()
        assert set(d.keys()) == {
            "cache_dir", "namespace", "keep_in_memory", "strict_paths", "log_level",
        }
        assert d["namespace"] == "mtime-cache"
