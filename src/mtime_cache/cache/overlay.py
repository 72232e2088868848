"""In-memory overlay in front of the disk entries."""

from __future__ import annotations


class MemoryOverlay:
    """Plain dict keyed by absolute source path.

    Entries are returned without any staleness check until cleared, so
    they can lag behind a source file modified after they were stored.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, source_path: str) -> str | None:
        return self._store.get(source_path)

    def set(self, source_path: str, content: str) -> None:
        self._store[source_path] = content

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, source_path: object) -> bool:
        return source_path in self._store

    def __len__(self) -> int:
        return len(self._store)
