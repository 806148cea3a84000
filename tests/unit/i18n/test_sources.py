"""Tests for translatable.i18n.sources and factory modules."""

import sqlite3

import pytest

from translatable.exceptions import ConfigurationError
from translatable.i18n import (
    InMemoryLocaleSource,
    LocaleRegistry,
    SQLiteLocaleSource,
    YAMLLocaleSource,
    create_locale_registry,
)
from tests.factories.i18n import make_locales_settings


@pytest.mark.unit
class TestInMemoryLocaleSource:
    """Tests for InMemoryLocaleSource."""

    def test_rows_for_known_table(self):
        source = InMemoryLocaleSource({"locales": [{"code": "en", "id": 1}]})
        assert source.rows("locales") == [{"code": "en", "id": 1}]

    def test_rows_for_unknown_table_is_empty(self):
        assert InMemoryLocaleSource().rows("locales") == []

    def test_set_rows_replaces_table(self):
        source = InMemoryLocaleSource({"locales": [{"code": "en", "id": 1}]})
        source.set_rows("locales", [{"code": "fr", "id": 2}])
        assert source.rows("locales") == [{"code": "fr", "id": 2}]


@pytest.mark.unit
class TestYAMLLocaleSource:
    """Tests for YAMLLocaleSource."""

    def test_initialization_nonexistent_directory(self, tmp_path):
        with pytest.raises(ConfigurationError):
            YAMLLocaleSource(tmp_path / "nonexistent")

    def test_rows_preserve_file_order(self, temp_locales_dir):
        rows = YAMLLocaleSource(temp_locales_dir).rows("locales")
        assert [row["code"] for row in rows] == ["en", "fr", "en-US"]
        assert [row["id"] for row in rows] == [1, 2, 3]

    def test_missing_file_raises(self, temp_locales_dir):
        with pytest.raises(ConfigurationError):
            YAMLLocaleSource(temp_locales_dir).rows("languages")

    def test_empty_file_yields_no_rows(self, tmp_path):
        (tmp_path / "locales.yml").write_text("")
        assert YAMLLocaleSource(tmp_path).rows("locales") == []

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "locales.yml").write_text("- code: en\n  id: [unclosed\n")
        with pytest.raises(ConfigurationError):
            YAMLLocaleSource(tmp_path).rows("locales")

    def test_non_list_yaml_raises(self, tmp_path):
        (tmp_path / "locales.yml").write_text("en: 1\nfr: 2\n")
        with pytest.raises(ConfigurationError):
            YAMLLocaleSource(tmp_path).rows("locales")

    def test_registry_from_yaml(self, temp_locales_dir):
        registry = LocaleRegistry(
            YAMLLocaleSource(temp_locales_dir), settings=make_locales_settings()
        )
        assert registry.all() == ["en", "fr", "en-US"]
        assert registry.get("en-US") == 3


@pytest.mark.unit
class TestSQLiteLocaleSource:
    """Tests for SQLiteLocaleSource."""

    def test_rows_support_column_lookup(self, sqlite_connection):
        rows = SQLiteLocaleSource(sqlite_connection).rows("locales")
        assert [row["code"] for row in rows] == ["en", "fr", "pt-BR"]
        assert [row["id"] for row in rows] == [10, 20, 30]

    def test_registry_from_sqlite(self, sqlite_connection):
        registry = LocaleRegistry(
            SQLiteLocaleSource(sqlite_connection), settings=make_locales_settings()
        )
        assert registry.all() == ["en", "fr", "pt-BR"]
        assert registry.get("pt-BR") == 30

    def test_database_path(self, tmp_path):
        path = tmp_path / "locales.db"
        with sqlite3.connect(path) as conn:
            conn.execute("CREATE TABLE languages (code TEXT, lang_id TEXT)")
            conn.execute("INSERT INTO languages VALUES ('de', 'lang-de')")
        conn.close()

        with SQLiteLocaleSource(path) as source:
            registry = LocaleRegistry(
                source,
                settings=make_locales_settings(
                    locales_table="languages", locales_lang_id_column="lang_id"
                ),
            )
        assert registry.get("de") == "lang-de"

    def test_caller_row_factory_untouched(self, sqlite_connection):
        SQLiteLocaleSource(sqlite_connection).rows("locales")

        assert sqlite_connection.row_factory is None
        assert sqlite_connection.execute("SELECT code FROM locales").fetchone() == ("en",)

    def test_close_leaves_caller_connection_open(self, sqlite_connection):
        with SQLiteLocaleSource(sqlite_connection) as source:
            source.rows("locales")
        source.close()

        assert sqlite_connection.execute("SELECT COUNT(*) FROM locales").fetchone() == (3,)

    def test_context_manager_closes_owned_connection(self, tmp_path):
        path = tmp_path / "locales.db"
        with sqlite3.connect(path) as conn:
            conn.execute("CREATE TABLE locales (id INTEGER, code TEXT)")
        conn.close()

        with SQLiteLocaleSource(path) as source:
            assert source.rows("locales") == []

        with pytest.raises(sqlite3.ProgrammingError):
            source.conn.execute("SELECT 1")


@pytest.mark.unit
class TestCreateLocaleRegistry:
    """Tests for create_locale_registry()."""

    def test_from_locales_dir(self, temp_locales_dir):
        registry = create_locale_registry(
            settings=make_locales_settings(), locales_dir=temp_locales_dir
        )
        assert isinstance(registry.source, YAMLLocaleSource)
        assert registry.all() == ["en", "fr", "en-US"]

    def test_from_database(self, sqlite_connection):
        registry = create_locale_registry(
            settings=make_locales_settings(), database=sqlite_connection
        )
        assert isinstance(registry.source, SQLiteLocaleSource)
        assert registry.has("pt-BR")

    def test_explicit_source_wins(self, temp_locales_dir):
        source = InMemoryLocaleSource({"locales": [{"code": "it", "id": 7}]})
        registry = create_locale_registry(
            source=source,
            settings=make_locales_settings(),
            locales_dir=temp_locales_dir,
        )
        assert registry.all() == ["it"]

    def test_default_in_memory_source_is_empty(self):
        registry = create_locale_registry(settings=make_locales_settings())
        assert isinstance(registry.source, InMemoryLocaleSource)
        assert registry.all() == []

    def test_unconfigured_environment_raises(self):
        """Without TRANSLATABLE_* variables, loading is a configuration error."""
        with pytest.raises(ConfigurationError):
            create_locale_registry()
