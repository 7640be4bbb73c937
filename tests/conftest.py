"""Shared fixtures."""

import pytest

from home_office_tracker.adapters.sqlite_store import SqliteDayStore


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    """Keep tests away from the real home_office_tracker.conf."""
    monkeypatch.setattr("home_office_tracker.config.CONFIG_FILE", tmp_path / "absent.conf")


@pytest.fixture
def store():
    s = SqliteDayStore(":memory:")
    yield s
    s.close()
