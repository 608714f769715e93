"""Pluggable application logger with a loguru backend.

Public API - users should only import from this module.

Usage:
    import applog

    # Module-level logging through the default driver
    applog.info('Application started')
    applog.error('Something failed')

    # Point the default manager at your configuration
    applog.configure(applog.Config({'app': {'logger': {'driver': 'console'}}}))

    # Pick a driver explicitly
    applog.get_manager().driver('file').warning('Disk almost full')

    # Register a custom driver
    applog.LoggerManager.extend('memory', MemoryDriver)

    # stdlib logging can be routed through the manager
    applog.intercept_stdlib(applog.get_manager())
"""
from __future__ import annotations

from concurrent.futures import Future
from pathlib import Path

from applog._backend import complete
from applog._logger import Logger
from applog.conf import Config
from applog.drivers import ConsoleDriver, FileDriver, LogDriver
from applog.exceptions import InvalidDriverError, InvalidLevelError, LoggerError
from applog.helpers import Helpers
from applog.levels import SYSLOG_LEVELS, Severity
from applog.loggers import StderrStreamLogger, intercept_stdlib
from applog.manager import DriverRegistry, LoggerManager
from applog.provider import AppProvider, bootstrap

# Module-level manager instance
_module_manager: LoggerManager | None = None


def configure(config: Config | None = None,
              helpers: Helpers | str | Path | None = None) -> LoggerManager:
    """Replace the module-level manager.

    Drivers built by the previous manager are closed.
    """
    global _module_manager
    if not isinstance(helpers, Helpers):
        helpers = Helpers(helpers)
    if _module_manager is not None:
        _module_manager.close()
    _module_manager = LoggerManager(config if config is not None else Config(), helpers)
    return _module_manager


def get_manager() -> LoggerManager:
    """Get the module-level manager, building a default one on first use."""
    if _module_manager is None:
        return configure()
    return _module_manager


# Module-level convenience functions
def emerg(msg: str, done=None) -> Future:
    """Log an emergency message."""
    return get_manager().emerg(msg, done)


def alert(msg: str, done=None) -> Future:
    """Log an alert message."""
    return get_manager().alert(msg, done)


def crit(msg: str, done=None) -> Future:
    """Log a critical message."""
    return get_manager().crit(msg, done)


def error(msg: str, done=None) -> Future:
    """Log an error message."""
    return get_manager().error(msg, done)


def warning(msg: str, done=None) -> Future:
    """Log a warning message."""
    return get_manager().warning(msg, done)


def notice(msg: str, done=None) -> Future:
    """Log a notice message."""
    return get_manager().notice(msg, done)


def info(msg: str, done=None) -> Future:
    """Log an info message."""
    return get_manager().info(msg, done)


def debug(msg: str, done=None) -> Future:
    """Log a debug message."""
    return get_manager().debug(msg, done)


# Aliases
warn = warning
critical = crit


__all__ = [
    # Configuration
    'configure',
    'get_manager',
    'Config',
    'Helpers',
    # Logger access
    'Logger',
    'LoggerManager',
    'DriverRegistry',
    # Drivers
    'LogDriver',
    'FileDriver',
    'ConsoleDriver',
    # Levels
    'Severity',
    'SYSLOG_LEVELS',
    # Logging methods
    'emerg',
    'alert',
    'crit',
    'critical',
    'error',
    'warning',
    'warn',
    'notice',
    'info',
    'debug',
    # Errors
    'LoggerError',
    'InvalidDriverError',
    'InvalidLevelError',
    # Container
    'AppProvider',
    'bootstrap',
    # Utilities
    'complete',
    'intercept_stdlib',
    'StderrStreamLogger',
]
