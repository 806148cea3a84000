"""Shared fixtures for the translatable test suite."""

import os

import pytest

from translatable.services import get_settings


@pytest.fixture(autouse=True)
def clean_translatable_env(monkeypatch):
    """Isolate tests from TRANSLATABLE_* variables and cached settings."""
    for name in list(os.environ):
        if name.startswith("TRANSLATABLE_") or name in ("LOG_LEVEL", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
