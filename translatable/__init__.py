"""translatable - per-locale expansion of validation rules.

Example:
    from translatable import InMemoryLocaleSource, LocaleRegistry, LocalesSettings, RuleFactory

    registry = LocaleRegistry(
        InMemoryLocaleSource({"locales": [{"code": "en", "id": 1}, {"code": "fr", "id": 2}]}),
        settings=LocalesSettings(
            locales_table="locales",
            locales_table_column="code",
            locales_lang_id_column="id",
        ),
    )
    RuleFactory.make({"%title%": "required|string"}, registry=registry)
    # {"en.title": "required|string", "fr.title": "required|string"}
"""

from translatable.configuration import (
    LocalesSettings,
    RuleFactorySettings,
    RuleFormat,
    Settings,
)
from translatable.exceptions import (
    ConfigurationError,
    InvalidLocaleError,
    TranslatableError,
)
from translatable.i18n import (
    ContextLocaleResolver,
    InMemoryLocaleSource,
    Locale,
    LocaleRegistry,
    LocaleSource,
    SQLiteLocaleSource,
    StaticLocaleResolver,
    YAMLLocaleSource,
    create_locale_registry,
)
from translatable.validation import PlaceholderMatcher, RuleFactory

__all__ = [
    "Settings",
    "LocalesSettings",
    "RuleFactorySettings",
    "RuleFormat",
    "TranslatableError",
    "ConfigurationError",
    "InvalidLocaleError",
    "Locale",
    "LocaleRegistry",
    "LocaleSource",
    "InMemoryLocaleSource",
    "YAMLLocaleSource",
    "SQLiteLocaleSource",
    "StaticLocaleResolver",
    "ContextLocaleResolver",
    "create_locale_registry",
    "PlaceholderMatcher",
    "RuleFactory",
]
