"""Feature-level fixtures for locale registry tests."""

import sqlite3

import pytest
import yaml

from tests.factories.i18n import make_locale_registry, make_locale_rows


@pytest.fixture
def registry():
    """Registry loaded with en, fr, de (ids 1, 2, 3)."""
    return make_locale_registry()


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a directory with a locales.yml source file.

    Contents:
    - en -> 1
    - fr -> 2
    - en-US -> 3
    """
    with open(tmp_path / "locales.yml", "w") as f:
        yaml.dump(make_locale_rows(["en", "fr", "en-US"]), f)
    return tmp_path


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite database with a populated locales table."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE locales (id INTEGER PRIMARY KEY, code TEXT NOT NULL)")
    conn.executemany(
        "INSERT INTO locales (id, code) VALUES (?, ?)",
        [(10, "en"), (20, "fr"), (30, "pt-BR")],
    )
    conn.commit()
    yield conn
    conn.close()
