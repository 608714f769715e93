from applog.drivers.base import Done, LogDriver, SinkDriver
from applog.drivers.console import ConsoleDriver
from applog.drivers.file import FileDriver

# Built-in drivers, seed for the default registry
DRIVERS = {
    'file': FileDriver,
    'console': ConsoleDriver,
}

__all__ = [
    'DRIVERS',
    'ConsoleDriver',
    'Done',
    'FileDriver',
    'LogDriver',
    'SinkDriver',
]
