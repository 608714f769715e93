"""Loguru sinks and formatters used by the built-in drivers.

Each sink is a callable that receives a loguru Message object.
"""
from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from applog.levels import Severity

if TYPE_CHECKING:
    from loguru import Message, Record

__all__ = ['ConsoleSink', 'format_json_line']


class ConsoleSink:
    """Write records to stderr or stdout, syslog style.

    Records at `stderr_rank` or more urgent go to stderr, the rest to stdout.
    Streams are looked up per record so redirected ``sys.stdout`` and
    ``sys.stderr`` are honoured.
    """

    def __init__(self, stderr_rank: int = Severity.WARNING):
        self.stderr_rank = stderr_rank

    def stream_for(self, rank: int) -> TextIO:
        return sys.stderr if rank <= self.stderr_rank else sys.stdout

    def __call__(self, message: Message) -> None:
        stream = self.stream_for(message.record['extra']['rank'])
        stream.write(message)
        stream.flush()


def format_json_line(record: Record) -> str:
    """Serialize a record into one JSON object per line.

    Loguru treats the return value as a template, so the JSON goes through
    ``extra`` rather than into the template itself.
    """
    record['extra']['serialized'] = json.dumps({
        'level': record['extra']['level_name'],
        'message': record['message'],
        'timestamp': record['time'].isoformat(),
    })
    return '{extra[serialized]}\n'
