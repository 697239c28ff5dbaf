"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hilbertfrac.config import Settings, get_settings

SETTINGS_ENV_VARS = (
    "HILBERTFRAC_MAX_DEPTH",
    "HILBERTFRAC_PRECISION",
    "HILBERTFRAC_CACHE_SIZE",
    "HILBERTFRAC_ROTATE",
    "HILBERTFRAC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(max_depth=5, precision=32, cache_size=16)


@pytest.fixture
def fixed_settings():
    return Settings(max_depth=5, precision=32, cache_size=16, rotate=False)
