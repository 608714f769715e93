"""In-memory configuration source.

Anything with a ``get(key, default)`` method can stand in for `Config`;
this one stores nested dicts addressed by dotted keys.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any

__all__ = ['Config']

_MISSING = object()


class Config:
    """Dotted-key configuration store.

    >>> config = Config({'app': {'logger': {'driver': 'console'}}})
    >>> config.get('app.logger.driver')
    'console'
    >>> config.get('app.logger.file', {})
    {}
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = deepcopy(values) if values else {}

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._values
        for part in key.split('.'):
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return node

    def set(self, key: str, value: Any) -> None:
        parts = key.split('.')
        node = self._values
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def __repr__(self) -> str:
        return f'Config({self._values!r})'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
