"""
Root conftest.py - test-suite wide configuration.

Every test runs with HOME and the working directory pointed at a temporary
directory, so no test can read ~/.loggit.yaml or write ~/.loggit/db.json.
"""

import pytest

from loggit_core.models import LogRecord
from loggit_core.store import LogStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME and cwd at a scratch directory; disable prompt delays."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("loggit_cli.ui.prompts.INPUT_DELAY", 0)
    return home


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "data" / "db.json"


@pytest.fixture
def store(store_path):
    """Empty LogStore in a temporary directory"""
    return LogStore(str(store_path))


@pytest.fixture
def acme_record():
    return LogRecord(customer="Acme", hours=2.5, date="2024-01-01", description="meeting")


@pytest.fixture
def key_feed():
    """
    Build a read_key replacement that returns the given codes in order.

    Running out of keys fails the test instead of blocking.
    """
    def factory(*codes):
        remaining = list(codes)

        def read_key():
            if not remaining:
                raise AssertionError("widget asked for more keys than the test supplied")
            return remaining.pop(0)

        return read_key

    return factory
