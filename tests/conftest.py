import json
from pathlib import Path

import pytest

from applog._backend import get_backend
from applog.conf import Config
from applog.helpers import Helpers
from applog.manager import LoggerManager


@pytest.fixture(autouse=True)
def _clean_backend():
    """Drop sinks added by a test so drivers never leak between tests."""
    yield
    get_backend().reset()


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def helpers(tmp_path) -> Helpers:
    return Helpers(tmp_path)


@pytest.fixture
def registry(monkeypatch):
    """Give LoggerManager a private copy of the class registry."""
    isolated = LoggerManager.registry.copy()
    monkeypatch.setattr(LoggerManager, 'registry', isolated)
    return isolated


def _read_records(path: str | Path) -> list[dict]:
    lines = Path(path).read_text(encoding='utf-8').splitlines()
    return [json.loads(line) for line in lines if line.strip()]


@pytest.fixture
def read_records():
    """Parse a JSON-lines log file into a list of records."""
    return _read_records
