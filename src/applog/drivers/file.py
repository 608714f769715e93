"""Rotating JSON-lines file driver.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from applog.drivers.base import SinkDriver, driver_settings
from applog.helpers import Helpers
from applog.sinks import format_json_line

__all__ = ['FileDriver']


class FileDriver(SinkDriver):
    """Append one JSON record per line to a log file.

    Settings come from ``app.logger.file``. A relative ``filename`` is
    placed in ``helpers.logs_path()``; an absolute one is used as is. The
    file and its directory are created on the first write. ``rotation``,
    ``retention`` and ``compression`` take loguru's values, e.g.
    ``'10 MB'``, ``'1 day'``, ``'zip'``.
    """
    defaults = {
        'filename': 'applog.log',
        'rotation': None,
        'retention': None,
        'compression': None,
    }

    def __init__(self, config: Any, helpers: Helpers) -> None:
        self.config = driver_settings(config, 'file', self.defaults)
        filename = Path(self.config['filename'])
        if not filename.is_absolute():
            filename = helpers.logs_path(str(filename))
        self.config['filename'] = str(filename)
        super().__init__(self.config['level'])
        self._attach(
            self.config['filename'],
            format=format_json_line,
            rotation=self.config['rotation'],
            retention=self.config['retention'],
            compression=self.config['compression'],
            delay=True,
            buffering=1,
            encoding='utf-8',
        )

    @property
    def filename(self) -> str:
        return self.config['filename']
