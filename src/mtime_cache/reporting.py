"""Reporter collaborator — where the cache sends its events.

The cache never logs directly. It calls ``report(event, **details)`` on
whatever reporter it was given; the default forwards to ``logging``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# Events that indicate something went wrong on disk
_WARNING_EVENTS = frozenset({"cache.write_failed"})


class Reporter(Protocol):
    def report(self, event: str, **details: Any) -> None: ...


class LoggingReporter:
    """Reporter that writes events to a standard library logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def report(self, event: str, **details: Any) -> None:
        level = logging.WARNING if event in _WARNING_EVENTS else logging.DEBUG
        if not self._log.isEnabledFor(level):
            return
        rendered = " ".join(f"{key}={value}" for key, value in sorted(details.items()))
        self._log.log(level, "%s %s", event, rendered)


class RecordingReporter:
    """Reporter that keeps events in memory, for inspection."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def report(self, event: str, **details: Any) -> None:
        self.events.append((event, details))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]
