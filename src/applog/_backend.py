"""Loguru backend - internal implementation detail.

This module is NOT part of the public API. Drivers write through it and
nothing else imports loguru. To switch backends, only this file needs to
change.
"""
from __future__ import annotations

import threading
from collections.abc import Callable
from contextlib import suppress
from typing import Any

from loguru import logger as _loguru

from applog.levels import Severity

__all__ = ['get_backend', 'complete', 'LOGURU_LEVELS']

# syslog rank -> (loguru level name, loguru severity, color)
LOGURU_LEVELS: dict[Severity, tuple[str, int, str]] = {
    Severity.EMERG: ('EMERG', 60, '<red><bold><reverse>'),
    Severity.ALERT: ('ALERT', 55, '<red><bold><underline>'),
    Severity.CRIT: ('CRITICAL', 50, '<red><bold>'),
    Severity.ERROR: ('ERROR', 40, '<red>'),
    Severity.WARNING: ('WARNING', 30, '<yellow>'),
    Severity.NOTICE: ('NOTICE', 25, '<cyan>'),
    Severity.INFO: ('INFO', 20, '<green>'),
    Severity.DEBUG: ('DEBUG', 10, '<magenta>'),
}

# extra key that routes a record to exactly one driver's sink
SINK_KEY = 'applog_sink'


def _only(sink_key: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record['extra'].get(SINK_KEY) == sink_key
    return _filter


class LoguruBackend:
    """Loguru-based logging backend.

    Every driver owns one sink. Records are bound to a sink key so a record
    logged by one driver never reaches another driver's sink.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._sink_ids: list[int] = []
        # loguru ships a catch-all stderr sink that would duplicate output
        with suppress(ValueError):
            _loguru.remove(0)
        self._configure_levels()

    def _configure_levels(self) -> None:
        """Register the syslog levels that loguru lacks and set colors."""
        for name, no, color in LOGURU_LEVELS.values():
            try:
                _loguru.level(name)
            except ValueError:
                _loguru.level(name, no=no, color=color)
            else:
                _loguru.level(name, color=color)

    def reset(self) -> None:
        """Remove every sink added through this backend."""
        for sink_id in list(self._sink_ids):
            self.remove_sink(sink_id)
        self._configure_levels()

    def log(self, rank: int, msg: str, *, sink_key: str, depth: int = 0) -> None:
        """Log a message at the given syslog rank to one sink.

        Sinks are added with ``catch=False`` so transport errors propagate
        to the calling driver.
        """
        severity = Severity(rank)
        name = LOGURU_LEVELS[severity][0]
        _loguru.bind(**{SINK_KEY: sink_key}, level_name=severity.label, rank=int(severity)).opt(
            depth=depth + 2
        ).log(name, msg)

    def add_sink(self, sink: Any, sink_key: str, **kwargs) -> int:
        """Add a sink that only receives records bound to `sink_key`."""
        kwargs.setdefault('level', 0)
        kwargs.setdefault('catch', False)
        with self._lock:
            sink_id = _loguru.add(sink, filter=_only(sink_key), **kwargs)
            self._sink_ids.append(sink_id)
            return sink_id

    def remove_sink(self, sink_id: int) -> None:
        """Remove a sink by ID, ignoring sinks already removed."""
        with self._lock:
            if sink_id in self._sink_ids:
                self._sink_ids.remove(sink_id)
                _loguru.remove(sink_id)

    @property
    def sink_ids(self) -> list[int]:
        with self._lock:
            return list(self._sink_ids)

    def complete(self) -> None:
        """Wait for all async sinks to complete."""
        _loguru.complete()


# Singleton backend instance
_backend: LoguruBackend | None = None
_backend_lock = threading.Lock()


def get_backend() -> LoguruBackend:
    """Get the singleton backend instance."""
    global _backend
    with _backend_lock:
        if _backend is None:
            _backend = LoguruBackend()
    return _backend


def complete() -> None:
    """Wait for all async sinks to complete. Call on shutdown."""
    get_backend().complete()
