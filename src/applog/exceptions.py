"""Logger errors.

Configuration and lookup errors are raised at the call site. Transport
failures are never raised, they reach the caller through the completion
callback.
"""
from __future__ import annotations

__all__ = ['LoggerError', 'InvalidLevelError', 'InvalidDriverError']


class LoggerError(Exception):
    """Base class for logger errors, carries a stable error code."""
    code = 'E_LOGGER'

    def __init__(self, message: str) -> None:
        super().__init__(f'{self.code}: {message}')
        self.message = message


class InvalidLevelError(LoggerError, ValueError):
    """Raised when a severity name or rank is not recognized."""
    code = 'E_INVALID_LOG_LEVEL'

    def __init__(self, level: object) -> None:
        super().__init__(f'{level!r} is not a valid log level')
        self.level = level


class InvalidDriverError(LoggerError, LookupError):
    """Raised when a logger driver is not registered."""
    code = 'E_INVALID_LOGGER_DRIVER'

    def __init__(self, driver: str) -> None:
        super().__init__(f'Logger driver {driver} does not exists')
        self.driver = driver
