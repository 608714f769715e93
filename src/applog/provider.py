"""Application provider - binds the framework services into the container.

Config, path helpers and the logger manager are singletons per injector.
The default-driver Logger is resolved through the manager, which caches it.
"""
from pathlib import Path

from injector import Injector, Module, provider, singleton

from applog._logger import Logger
from applog.conf import Config
from applog.helpers import Helpers
from applog.manager import LoggerManager

__all__ = ['AppProvider', 'bootstrap']


class AppProvider(Module):
    """DI module registering the application services.

    Args:
        app_root: application root for `Helpers`, defaults to the cwd
        config: configuration source, defaults to an empty `Config`
    """

    def __init__(self, app_root: str | Path | None = None,
                 config: Config | None = None) -> None:
        self._app_root = app_root
        self._config = config

    @provider
    @singleton
    def provide_helpers(self) -> Helpers:
        """Provide path helpers rooted at the application root."""
        return Helpers(self._app_root)

    @provider
    @singleton
    def provide_config(self) -> Config:
        """Provide the configuration source."""
        return self._config if self._config is not None else Config()

    @provider
    @singleton
    def provide_logger_manager(self, config: Config, helpers: Helpers) -> LoggerManager:
        """Provide the logger manager."""
        return LoggerManager(config, helpers)

    @provider
    def provide_logger(self, manager: LoggerManager) -> Logger:
        """Provide the Logger for the configured default driver."""
        return manager.driver()


def bootstrap(app_root: str | Path | None = None,
              config: Config | None = None,
              modules: tuple[Module, ...] = ()) -> Injector:
    """Build an injector with `AppProvider` and any extra modules.

    The default Logger is resolved eagerly so an unknown default driver
    fails at startup.
    """
    injector = Injector([AppProvider(app_root, config), *modules])
    injector.get(Logger)
    return injector
