"""Locale registry - the set of known locales driving rule expansion.

Main components:
- models: Locale
- sources: LocaleSource, InMemoryLocaleSource, YAMLLocaleSource, SQLiteLocaleSource
- resolvers: LocaleResolver, StaticLocaleResolver, ContextLocaleResolver
- registry: LocaleRegistry
- factory: create_locale_registry
"""

from translatable.i18n.factory import create_locale_registry
from translatable.i18n.models import Locale
from translatable.i18n.registry import LocaleRegistry
from translatable.i18n.resolvers import (
    ContextLocaleResolver,
    LocaleResolver,
    StaticLocaleResolver,
)
from translatable.i18n.sources import (
    InMemoryLocaleSource,
    LocaleSource,
    SQLiteLocaleSource,
    YAMLLocaleSource,
)

__all__ = [
    "Locale",
    "LocaleRegistry",
    "LocaleSource",
    "InMemoryLocaleSource",
    "YAMLLocaleSource",
    "SQLiteLocaleSource",
    "LocaleResolver",
    "StaticLocaleResolver",
    "ContextLocaleResolver",
    "create_locale_registry",
]
