"""Bridges from stdlib logging and raw streams into a Logger.
"""
from __future__ import annotations

import io
import logging
from typing import Any

from applog.levels import Severity

__all__ = ['InterceptHandler', 'StderrStreamLogger', 'intercept_stdlib', 'stdlib_to_rank']

_formatter = logging.Formatter()


def stdlib_to_rank(levelno: int) -> int:
    """Map a stdlib level number onto the nearest syslog rank.

    >>> stdlib_to_rank(logging.WARNING)
    4
    >>> stdlib_to_rank(5)
    7
    """
    if levelno >= logging.CRITICAL:
        return Severity.CRIT.value
    if levelno >= logging.ERROR:
        return Severity.ERROR.value
    if levelno >= logging.WARNING:
        return Severity.WARNING.value
    if levelno >= logging.INFO:
        return Severity.INFO.value
    return Severity.DEBUG.value


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging records to a Logger.

    `target` is anything with ``log(rank, message)``: a Logger or a
    LoggerManager (which logs to its default driver).
    """

    def __init__(self, target: Any, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = record.getMessage()
        except (TypeError, ValueError):
            msg = f'{record.msg} {record.args}' if record.args else str(record.msg)
        if record.name and record.name != 'root':
            msg = f'[{record.name}] {msg}'
        if record.exc_info:
            msg = f'{msg}\n{_formatter.formatException(record.exc_info)}'
        self.target.log(stdlib_to_rank(record.levelno), msg)


def intercept_stdlib(target: Any, logger_names: list[str] | None = None) -> None:
    """Route stdlib logging through `target`.

    Args:
        target: Logger or LoggerManager receiving the records
        logger_names: Specific logger names to intercept. If None,
                      intercepts the root logger (all loggers).
    """
    if not logger_names:
        logging.basicConfig(handlers=[InterceptHandler(target)], level=0, force=True)
        return
    for name in logger_names:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler(target)]
        stdlib_logger.propagate = False
        stdlib_logger.setLevel(logging.DEBUG)  # Let the driver threshold filter


class StderrStreamLogger:
    """Patch over stderr to log print statements to a Logger.

    Placeholders isatty and fileno mimic python stream.
    stderr still accessible at sys.__stderr__
    """

    def __init__(self, logger: Any, level: int = Severity.INFO.value) -> None:
        self.logger = logger
        self.level = level

    def write(self, buf: str) -> None:
        """Write buffer lines to logger."""
        for line in buf.rstrip().splitlines():
            msg = line.rstrip()
            if msg:
                self.logger.log(self.level, msg)

    def flush(self) -> None:
        pass

    def isatty(self) -> bool:
        """Return False as this is not a TTY.
        """
        return False

    def fileno(self) -> int:
        """Raise UnsupportedOperation as this is not a real file.
        """
        raise io.UnsupportedOperation('fileno')
