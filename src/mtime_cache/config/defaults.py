"""Package-level default configuration values."""

from __future__ import annotations

import tempfile
from typing import Any

from mtime_cache.types import DEFAULT_NAMESPACE

# Cache settings
DEFAULT_CACHE_DIR = tempfile.gettempdir()
DEFAULT_KEEP_IN_MEMORY = False
DEFAULT_STRICT_PATHS = False

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "cache_dir": DEFAULT_CACHE_DIR,
        "namespace": DEFAULT_NAMESPACE,
        "keep_in_memory": DEFAULT_KEEP_IN_MEMORY,
        "strict_paths": DEFAULT_STRICT_PATHS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
