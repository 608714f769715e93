"""Logger facade over a single driver.

Users interact with this class, never with a driver's transport directly.
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING

from applog.levels import Severity, rank_of

if TYPE_CHECKING:
    from applog.drivers.base import Done, LogDriver

__all__ = ['Logger']


class Logger:
    """Severity methods bound to one driver.

    Every method delegates straight to ``driver.log`` with the syslog rank
    and returns the driver's future.
    """

    def __init__(self, driver: LogDriver):
        self.driver = driver

    @property
    def level(self) -> str:
        return self.driver.level

    @level.setter
    def level(self, name: str) -> None:
        self.driver.level = name

    def log(self, level: int | str, message: str, done: Done | None = None) -> Future:
        return self.driver.log(rank_of(level), message, done)

    def emerg(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.EMERG.value, message, done)

    def alert(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.ALERT.value, message, done)

    def crit(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.CRIT.value, message, done)

    def error(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.ERROR.value, message, done)

    def warning(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.WARNING.value, message, done)

    def notice(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.NOTICE.value, message, done)

    def info(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.INFO.value, message, done)

    def debug(self, message: str, done: Done | None = None) -> Future:
        return self.driver.log(Severity.DEBUG.value, message, done)

    # Aliases
    warn = warning
    critical = crit

    def __repr__(self) -> str:
        return f'Logger({self.driver!r})'
