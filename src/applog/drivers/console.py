"""Console driver, stderr for warnings and worse, stdout otherwise.
"""
from __future__ import annotations

from typing import Any

from libb import is_tty

from applog.drivers.base import SinkDriver, driver_settings
from applog.sinks import ConsoleSink

__all__ = ['ConsoleDriver']

FMT_CONSOLE = '{time:YYYY-MM-DD HH:mm:ss} <level>{extra[level_name]}</level>: {message}'


class ConsoleDriver(SinkDriver):
    """Write formatted lines to the standard streams.

    Settings come from ``app.logger.console``: ``level``, ``format`` (a
    loguru format string, ``{extra[level_name]}`` is the syslog name) and
    ``colorize`` (None means color only when attached to a terminal).
    """
    defaults = {
        'format': FMT_CONSOLE,
        'colorize': None,
    }

    def __init__(self, config: Any) -> None:
        self.config = driver_settings(config, 'console', self.defaults)
        super().__init__(self.config['level'])
        colorize = self.config['colorize']
        if colorize is None:
            colorize = is_tty()
        self._attach(ConsoleSink(), format=self.config['format'], colorize=colorize)
