"""Staleness check based on modification timestamps."""

from __future__ import annotations

import os
from pathlib import Path


def is_stale(source_path: str | Path, entry_path: str | Path) -> bool:
    """True when the entry was written before the source last changed.

    Equal timestamps count as fresh. Both paths are stat-ed; any
    ``OSError`` propagates to the caller.
    """
    source_mtime = os.stat(source_path).st_mtime_ns
    entry_mtime = os.stat(entry_path).st_mtime_ns
    return entry_mtime < source_mtime
