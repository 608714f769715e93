"""Syslog severity levels.

Lower rank is more urgent. The set of names is fixed.
"""
from __future__ import annotations

from enum import IntEnum

from applog.exceptions import InvalidLevelError

__all__ = ['Severity', 'SYSLOG_LEVELS', 'rank_of', 'name_of', 'validate_level']


class Severity(IntEnum):
    """Syslog severities, most urgent first."""
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        return self.name.lower()


SYSLOG_LEVELS: dict[str, int] = {s.label: s.value for s in Severity}


def validate_level(name: str) -> str:
    """Return `name` if it is a known severity, raise otherwise.
    """
    if not isinstance(name, str) or name not in SYSLOG_LEVELS:
        raise InvalidLevelError(name)
    return name


def rank_of(level: int | str) -> int:
    """Resolve a severity name or rank to its rank.

    >>> rank_of('warning')
    4
    >>> rank_of(6)
    6
    """
    if isinstance(level, str):
        return SYSLOG_LEVELS[validate_level(level)]
    try:
        return Severity(level).value
    except ValueError:
        raise InvalidLevelError(level) from None


def name_of(level: int | str) -> str:
    """Resolve a severity name or rank to its name.

    >>> name_of(0)
    'emerg'
    """
    return Severity(rank_of(level)).label


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
