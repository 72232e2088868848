"""Shared Pydantic models for mtime-cache."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NAMESPACE = "mtime-cache"


class CacheOptions(BaseModel):
    """Construction options for a FileCache."""

    cache_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()))
    namespace: str = DEFAULT_NAMESPACE
    keep_in_memory: bool = False
    strict_paths: bool = False

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> CacheOptions:
        """Pick the cache options out of a merged configuration dict."""
        fields = {
            key: config[key]
            for key in cls.model_fields
            if config.get(key) is not None
        }
        return cls(**fields)

    @property
    def storage_root(self) -> Path:
        return self.cache_dir / self.namespace


class WriteResult(BaseModel):
    """Outcome of persisting a single entry to disk."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: Path
    ok: bool = True
    error: str | None = None
    original: OSError | None = Field(default=None, exclude=True, repr=False)


class CacheStats(BaseModel):
    """Per-instance lookup and write counters."""

    hits: int = 0
    overlay_hits: int = 0
    misses: int = 0
    stale: int = 0
    writes: int = 0
    write_failures: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.overlay_hits + self.misses + self.stale

    @property
    def hit_rate(self) -> float:
        total = self.lookups
        return (self.hits + self.overlay_hits) / total if total > 0 else 0.0
