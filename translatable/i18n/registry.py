"""Registry of known locale codes.

Holds an ordered code -> id mapping loaded from a LocaleSource, and the
helpers for composite "language + separator + country" locales.
"""

from typing import Any, Dict, Iterator, List, Optional

from translatable.configuration import LocalesSettings
from translatable.exceptions import ConfigurationError
from translatable.i18n.models import Locale
from translatable.i18n.resolvers import LocaleResolver
from translatable.i18n.sources import LocaleSource
from translatable.logging import get_module_logger

logger = get_module_logger()


class LocaleRegistry:
    """Ordered, key-unique mapping of locale code to locale id.

    The mapping is loaded from a tabular LocaleSource and may be mutated
    afterwards with add/forget to reflect runtime overrides. Iteration
    follows insertion order.

    Attributes:
        source: LocaleSource the registry loads from.
        settings: LocalesSettings naming the source table and columns.
        resolver: Optional LocaleResolver consulted by current().

    Usage:
        registry = LocaleRegistry(
            source=YAMLLocaleSource(Path("config/locales")),
            settings=LocalesSettings(
                locales_table="locales",
                locales_table_column="code",
                locales_lang_id_column="id",
            ),
        )
        registry.has("en")  # True
    """

    def __init__(
        self,
        source: LocaleSource,
        settings: Optional[LocalesSettings] = None,
        resolver: Optional[LocaleResolver] = None,
        autoload: bool = True,
    ):
        """Initialize the registry.

        Args:
            source: LocaleSource providing the locale rows.
            settings: Source and separator settings (default: from environment).
            resolver: Collaborator supplying the active locale for current().
            autoload: Whether to load() immediately.

        Raises:
            ConfigurationError: If autoload is set and the source
                configuration is incomplete.
        """
        self.source = source
        self.settings = settings or LocalesSettings()
        self.resolver = resolver
        self._locales: Dict[str, Any] = {}

        if autoload:
            self.load()

    def load(self) -> None:
        """Replace the mapping with the rows of the configured source.

        The new mapping is built in full before it replaces the old one,
        so a failing load leaves the registry unchanged.

        Raises:
            ConfigurationError: If the table, code column or id column is
                not configured.
        """
        source_name = self.settings.source_name
        code_column = self.settings.locales_table_column
        id_column = self.settings.locales_lang_id_column

        if not self.settings.is_source_configured:
            logger.error(
                "locales_source_not_configured",
                source=source_name,
                code_column=code_column,
                id_column=id_column,
            )
            raise ConfigurationError()

        locales: Dict[str, Any] = {}
        for row in self.source.rows(source_name):
            locales[row[code_column]] = row[id_column]

        self._locales = locales
        logger.info("locales_loaded", source=source_name, locale_count=len(locales))

    def add(self, locale: str) -> None:
        """Register a locale whose id is the code itself."""
        self._locales[locale] = locale
        logger.debug("locale_added", locale=locale)

    def add_simple(self, locale: str) -> None:
        self.add(locale)

    def add_composite(self, language: str, country: str) -> None:
        """Register the composite locale built from language and country."""
        self.add(self.get_country_locale(language, country))

    def forget(self, locale: str) -> None:
        """Remove a locale; unknown codes are ignored."""
        if locale in self._locales:
            del self._locales[locale]
            logger.debug("locale_forgotten", locale=locale)

    def has(self, locale: str) -> bool:
        return locale in self._locales

    def get(self, locale: str) -> Optional[Any]:
        """Return the id mapped to ``locale``, or None when unknown."""
        return self._locales.get(locale)

    def all(self) -> List[str]:
        """Return every locale code in insertion order."""
        return list(self._locales)

    def to_list(self) -> List[str]:
        return self.all()

    def locales(self) -> List[Locale]:
        """Return Locale records for every registered code."""
        separator = self.get_locale_separator()
        return [
            Locale(code=code, id=locale_id, separator=separator)
            for code, locale_id in self._locales.items()
        ]

    def current(self) -> Any:
        """Return the active locale.

        Uses the resolver's locale when it supplies one, otherwise the
        configured default. Known codes map to their id; unknown values are
        returned unchanged.
        """
        key = None
        if self.resolver is not None:
            key = self.resolver.get_locale()
        if not key:
            key = self.settings.locale

        if key in self._locales:
            return self._locales[key]
        return key

    def get_locale_separator(self) -> str:
        return self.settings.locale_separator or "-"

    def get_country_locale(self, locale: str, country: str) -> str:
        """Join language and country (e.g., "en", "US" -> "en-US")."""
        return f"{locale}{self.get_locale_separator()}{country}"

    def get_language_from_country_based_locale(self, locale: str) -> str:
        """Return the part before the first separator ("en-US" -> "en")."""
        return locale.split(self.get_locale_separator())[0]

    def is_locale_country_based(self, locale: str) -> bool:
        return self.get_locale_separator() in locale

    def __contains__(self, locale: object) -> bool:
        return locale in self._locales

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._locales)

    def __delitem__(self, locale: str) -> None:
        self.forget(locale)

    def __repr__(self) -> str:
        return f"LocaleRegistry(locales={self.all()!r})"
