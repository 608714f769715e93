"""Application path helpers.
"""
from __future__ import annotations

from pathlib import Path

from applog import config as config_env

__all__ = ['Helpers']


class Helpers:
    """Resolve paths relative to the application root.

    The log directory defaults to ``<app_root>/logs`` and can be moved with
    ``CONFIG_LOGGER_DIR``.
    """

    def __init__(self, app_root: str | Path | None = None) -> None:
        self._app_root = Path(app_root or Path.cwd()).resolve()

    def app_root(self) -> Path:
        return self._app_root

    def logs_path(self, *parts: str) -> Path:
        base = Path(config_env.logger.dir) if config_env.logger.dir else self._app_root / 'logs'
        return base.joinpath(*parts)

    def __repr__(self) -> str:
        return f'Helpers({str(self._app_root)!r})'
