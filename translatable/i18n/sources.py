"""Locale source interface and implementations.

A locale source returns the rows of a named table; each row supports
lookup by column name. The registry picks the code and id columns out
of every row.
"""

import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog
import yaml

from translatable.exceptions import ConfigurationError

logger = structlog.get_logger(component="i18n.sources")

Row = Mapping[str, Any]


class LocaleSource(ABC):
    """Abstract base for locale sources."""

    @abstractmethod
    def rows(self, source: str) -> Iterable[Row]:
        """Return every row of the named source, in source order.

        Args:
            source: Source identifier (table name, optionally namespaced).

        Returns:
            Ordered iterable of rows supporting ``row[column]``.
        """
        pass


class InMemoryLocaleSource(LocaleSource):
    """Locale source backed by a dict of table name to rows.

    Unknown tables yield no rows.
    """

    def __init__(self, tables: Optional[Dict[str, List[Row]]] = None):
        self.tables: Dict[str, List[Row]] = dict(tables or {})

    def set_rows(self, source: str, rows: Iterable[Row]) -> None:
        self.tables[source] = list(rows)

    def rows(self, source: str) -> List[Row]:
        return list(self.tables.get(source, []))


class YAMLLocaleSource(LocaleSource):
    """Locale source reading ``<directory>/<source>.yml`` files.

    Each file holds a YAML list of mappings:

        - code: en
          id: 1
        - code: fr
          id: 2

    Attributes:
        directory: Directory containing the YAML files.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

        if not self.directory.exists():
            raise ConfigurationError(
                f"Locales directory not found: {self.directory}"
            )

    def rows(self, source: str) -> List[Row]:
        """Load the rows of a YAML source file.

        Raises:
            ConfigurationError: If the file is missing, unparsable, or not a
                list of mappings.
        """
        path = self.directory / f"{source}.yml"
        if not path.exists():
            raise ConfigurationError(f"Locales source file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ConfigurationError(f"Failed to parse {path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            logger.error("invalid_yaml_format", file=str(path), expected="list")
            raise ConfigurationError(
                f"Locales source {path} must contain a list of mappings"
            )

        logger.info("loaded_yaml_rows", file=str(path), row_count=len(data))
        return data


class SQLiteLocaleSource(LocaleSource):
    """Locale source reading a SQLite table.

    Accepts an open connection or a database path. Rows are returned as
    ``sqlite3.Row`` objects in table order. A connection passed in stays
    owned by the caller; one opened from a path is closed by ``close()``
    or on leaving a ``with`` block.

    Usage:
        with SQLiteLocaleSource("app.db") as source:
            registry = LocaleRegistry(source)
    """

    def __init__(self, database: "sqlite3.Connection | str | Path"):
        if isinstance(database, sqlite3.Connection):
            self.conn = database
            self._owns_connection = False
        else:
            self.conn = sqlite3.connect(str(database))
            self._owns_connection = True

    def rows(self, source: str) -> List[sqlite3.Row]:
        table = source.replace('"', '""')
        cursor = self.conn.cursor()
        cursor.row_factory = sqlite3.Row
        try:
            cursor.execute(f'SELECT * FROM "{table}"')
            return cursor.fetchall()
        finally:
            cursor.close()

    def close(self) -> None:
        if self._owns_connection:
            self.conn.close()

    def __enter__(self) -> "SQLiteLocaleSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
