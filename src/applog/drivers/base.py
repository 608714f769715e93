"""Driver contract and the loguru-backed driver base.
"""
from __future__ import annotations

import itertools
import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from applog import config as config_env
from applog._backend import get_backend
from applog.levels import SYSLOG_LEVELS, rank_of, validate_level

__all__ = ['Done', 'LogDriver', 'SinkDriver', 'driver_settings']

# Completion callback, receives None or the transport error
Done = Callable[[BaseException | None], Any]

_sink_keys = itertools.count()


def driver_settings(config: Any, name: str, defaults: dict[str, Any]) -> dict[str, Any]:
    """Merge ``app.logger.<name>`` from `config` over `defaults`.
    """
    settings = {'level': config_env.logger.level, **defaults}
    settings.update(config.get(f'app.logger.{name}', None) or {})
    return settings


def _complete(future: Future, done: Done | None, error: BaseException | None) -> Future:
    if error is None:
        future.set_result(None)
    else:
        future.set_exception(error)
    if done is not None:
        done(error)
    return future


class LogDriver(ABC):
    """Contract for logger drivers.

    A driver holds a severity threshold by name and writes messages that
    are at least as urgent as that threshold. ``log`` returns a future and
    calls `done` once the message is written or dropped; transport errors
    are delivered to both, never raised.

    Objects registered with `LoggerManager.extend` are not required to
    inherit from this class, they only need ``log`` and ``level``.
    """
    levels = SYSLOG_LEVELS

    def __init__(self, level: str = 'info') -> None:
        self._level = validate_level(level)

    @property
    def level(self) -> str:
        return self._level

    @level.setter
    def level(self, name: str) -> None:
        self._level = validate_level(name)

    def is_enabled(self, level: int | str) -> bool:
        """True when a message at `level` passes the threshold."""
        return rank_of(level) <= self.levels[self._level]

    @abstractmethod
    def log(self, level: int, message: str, done: Done | None = None) -> Future:
        ...

    def close(self) -> None:
        """Release the transport."""


class SinkDriver(LogDriver):
    """Driver that writes through a dedicated loguru sink.

    The sink is removed by ``close()`` or when the driver is garbage
    collected. Writing to a closed driver fails through `done` and the
    future like any other transport error.
    """

    def __init__(self, level: str = 'info') -> None:
        super().__init__(level)
        self._sink_key = f'{type(self).__name__.lower()}-{next(_sink_keys)}'
        self._sink_id: int | None = None
        self._finalizer: weakref.finalize | None = None
        self._closed = False

    def _attach(self, sink: Any, **kwargs) -> None:
        backend = get_backend()
        self._sink_id = backend.add_sink(sink, self._sink_key, **kwargs)
        # must not reference self, or the driver is never collected
        self._finalizer = weakref.finalize(self, backend.remove_sink, self._sink_id)

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, level: int, message: str, done: Done | None = None) -> Future:
        rank = rank_of(level)
        future: Future = Future()
        if not self.is_enabled(rank):
            return _complete(future, done, None)
        if self._closed:
            return _complete(future, done, ValueError(f'{self._sink_key} is closed'))
        try:
            get_backend().log(rank, str(message), sink_key=self._sink_key)
        except OSError as exc:
            return _complete(future, done, exc)
        return _complete(future, done, None)

    def close(self) -> None:
        self._closed = True
        if self._finalizer is not None:
            self._finalizer()
        self._sink_id = None
