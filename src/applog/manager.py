"""Driver registry and logger manager.

The manager resolves driver names to Logger instances, builds each one
lazily and keeps one Logger per driver name. It also acts as a logger for
the default driver, so ``manager.info('...')`` works without picking a
driver first.
"""
from __future__ import annotations

import inspect
import threading
from collections.abc import Iterator
from concurrent.futures import Future
from typing import Any

from applog import config as config_env
from applog._logger import Logger
from applog.drivers import DRIVERS
from applog.drivers.base import Done
from applog.exceptions import InvalidDriverError
from applog.helpers import Helpers

__all__ = ['DriverRegistry', 'LoggerManager', 'default_registry']


class DriverRegistry:
    """Thread-safe mapping of driver name to driver class or instance.

    Entries can be added or overwritten, never removed.
    """

    def __init__(self, drivers: dict[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._drivers: dict[str, Any] = dict(drivers or {})

    def register(self, name: str, driver: Any) -> None:
        with self._lock:
            self._drivers[name] = driver

    def get(self, name: str) -> Any:
        """Return the entry for `name`, raise `InvalidDriverError` if absent.
        """
        with self._lock:
            try:
                return self._drivers[name]
            except KeyError:
                raise InvalidDriverError(name) from None

    def names(self) -> list[str]:
        with self._lock:
            return list(self._drivers)

    def copy(self) -> DriverRegistry:
        with self._lock:
            return DriverRegistry(self._drivers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._drivers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        with self._lock:
            return len(self._drivers)


# Process-wide registry shared by managers that are not given their own
default_registry = DriverRegistry(DRIVERS)


class LoggerManager:
    """Resolve driver names to cached Logger instances.

    Args:
        config: configuration source with a ``get(key, default)`` method
        helpers: path helper handed to drivers that take one, defaults to
                 the current working directory
        registry: driver registry, defaults to the class-level registry
                  that `extend` writes to
    """
    registry: DriverRegistry = default_registry

    def __init__(self, config: Any, helpers: Helpers | None = None,
                 registry: DriverRegistry | None = None) -> None:
        self.config = config
        self.helpers = helpers or Helpers()
        self._registry = registry
        self._lock = threading.RLock()
        self._loggers: dict[str, Logger] = {}

    @classmethod
    def extend(cls, name: str, driver: Any) -> None:
        """Register `driver` under `name` for every manager using the class registry.

        `driver` is either a class, built on first use with the manager's
        config (and helpers if its constructor takes ``helpers``), or a
        ready driver object used as is. Loggers already built are not
        affected.
        """
        cls.registry.register(name, driver)

    @property
    def drivers(self) -> DriverRegistry:
        return self._registry if self._registry is not None else type(self).registry

    @property
    def default_driver(self) -> str:
        return self.config.get('app.logger.driver', config_env.logger.driver)

    def driver(self, name: str | None = None) -> Logger:
        """Return the Logger for `name`, building it on first request.

        Raises
            InvalidDriverError: `name` is not registered
        """
        if name is None:
            name = self.default_driver
        with self._lock:
            if name in self._loggers:
                return self._loggers[name]
            logger = Logger(self._build(self.drivers.get(name)))
            self._loggers[name] = logger
            return logger

    def _build(self, driver: Any) -> Any:
        if not isinstance(driver, type):
            return driver
        if 'helpers' in inspect.signature(driver).parameters:
            return driver(self.config, self.helpers)
        return driver(self.config)

    @property
    def loggers(self) -> dict[str, Logger]:
        """Snapshot of the Loggers built so far, by driver name."""
        with self._lock:
            return dict(self._loggers)

    def close(self) -> None:
        """Close every driver built by this manager and forget them."""
        with self._lock:
            loggers, self._loggers = self._loggers, {}
        for logger in loggers.values():
            close = getattr(logger.driver, 'close', None)
            if callable(close):
                close()

    # Default driver proxy

    @property
    def level(self) -> str:
        return self.driver().level

    @level.setter
    def level(self, name: str) -> None:
        self.driver().level = name

    def log(self, level: int | str, message: str, done: Done | None = None) -> Future:
        return self.driver().log(level, message, done)

    def emerg(self, message: str, done: Done | None = None) -> Future:
        return self.driver().emerg(message, done)

    def alert(self, message: str, done: Done | None = None) -> Future:
        return self.driver().alert(message, done)

    def crit(self, message: str, done: Done | None = None) -> Future:
        return self.driver().crit(message, done)

    def error(self, message: str, done: Done | None = None) -> Future:
        return self.driver().error(message, done)

    def warning(self, message: str, done: Done | None = None) -> Future:
        return self.driver().warning(message, done)

    def notice(self, message: str, done: Done | None = None) -> Future:
        return self.driver().notice(message, done)

    def info(self, message: str, done: Done | None = None) -> Future:
        return self.driver().info(message, done)

    def debug(self, message: str, done: Done | None = None) -> Future:
        return self.driver().debug(message, done)

    # Aliases
    warn = warning
    critical = crit
