"""Source path → cache entry path mapping."""

from __future__ import annotations

import os
from pathlib import Path

from mtime_cache.errors.exceptions import PathOutsideProjectError


def resolve_entry_path(
    base_dir: str | Path,
    storage_root: str | Path,
    source_path: str | Path,
    strict: bool = False,
) -> Path:
    """Map a source file to its entry under the storage root.

    The entry mirrors the source's location relative to ``base_dir``.
    Sources outside ``base_dir`` produce ``..`` segments that can land
    outside ``storage_root``; with ``strict`` those raise instead.
    """
    rel_path = os.path.relpath(os.fspath(source_path), os.fspath(base_dir))
    if strict and _escapes(rel_path):
        raise PathOutsideProjectError(
            f"{source_path} is not inside project base dir {base_dir}",
            source_path=Path(source_path),
            base_dir=Path(base_dir),
        )
    # Normalize without following symlinks
    return Path(os.path.abspath(os.path.join(os.fspath(storage_root), rel_path)))


def _escapes(rel_path: str) -> bool:
    if os.path.isabs(rel_path):
        return True
    first = Path(rel_path).parts[0] if Path(rel_path).parts else ""
    return first == os.pardir
