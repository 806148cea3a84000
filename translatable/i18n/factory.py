"""Factory functions for creating locale registries.

Provides convenience functions for building a LocaleRegistry from
configuration, choosing the locale source from the arguments given.
"""

import sqlite3
from pathlib import Path
from typing import Optional

import structlog

from translatable.configuration import LocalesSettings
from translatable.i18n.registry import LocaleRegistry
from translatable.i18n.resolvers import LocaleResolver
from translatable.i18n.sources import (
    InMemoryLocaleSource,
    LocaleSource,
    SQLiteLocaleSource,
    YAMLLocaleSource,
)

logger = structlog.get_logger()


def create_locale_registry(
    source: Optional[LocaleSource] = None,
    settings: Optional[LocalesSettings] = None,
    resolver: Optional[LocaleResolver] = None,
    locales_dir: Optional[Path] = None,
    database: "sqlite3.Connection | str | Path | None" = None,
) -> LocaleRegistry:
    """Create and load a LocaleRegistry.

    The source is picked in order: an explicit ``source``, a YAML
    ``locales_dir``, a SQLite ``database``, else an empty in-memory source.

    Args:
        source: Pre-built LocaleSource.
        settings: LocalesSettings (default: from environment).
        resolver: Active locale resolver for current().
        locales_dir: Directory of ``<table>.yml`` files.
        database: SQLite connection or database path.

    Returns:
        LocaleRegistry: Loaded registry.

    Raises:
        ConfigurationError: If the source configuration is incomplete.

    Usage:
        registry = create_locale_registry(locales_dir=Path("config/locales"))
    """
    if source is None:
        if locales_dir is not None:
            source = YAMLLocaleSource(locales_dir)
        elif database is not None:
            source = SQLiteLocaleSource(database)
        else:
            source = InMemoryLocaleSource()

    registry = LocaleRegistry(source=source, settings=settings, resolver=resolver)
    logger.info(
        "locale_registry_created",
        source_type=type(source).__name__,
        locale_count=len(registry),
    )
    return registry
