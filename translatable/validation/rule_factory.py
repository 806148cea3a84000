"""Expansion of locale-agnostic validation rules into per-locale rules."""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from translatable.configuration import RuleFactorySettings, RuleFormat
from translatable.exceptions import InvalidLocaleError
from translatable.i18n.registry import LocaleRegistry
from translatable.logging import get_module_logger
from translatable.validation.placeholder import PlaceholderMatcher

logger = get_module_logger()

RULE_SEPARATOR = "|"


class RuleFactory:
    """Rewrites translatable rule keys and values for every active locale.

    A key is translatable when it contains both the placeholder prefix and
    suffix. Each translatable entry is replaced by one entry per active
    locale; other entries are copied unchanged.

    Attributes:
        registry: LocaleRegistry used to validate and default the locales.
        format: RuleFormat used when rewriting placeholders.
        prefix: Opening placeholder marker.
        suffix: Closing placeholder marker.
        locales: Active locale codes, in expansion order.

    Usage:
        rules = RuleFactory.make(
            {"title": "required", "%title%": "string|max:255"},
            registry=registry,
        )
        # {"title": "required", "en.title": "string|max:255", "fr.title": ...}
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        format: Optional[RuleFormat] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
        settings: Optional[RuleFactorySettings] = None,
    ):
        """Initialize the factory.

        Options left as None are taken from ``settings``.

        Args:
            registry: LocaleRegistry of known locales.
            format: Placeholder rewrite convention.
            prefix: Opening placeholder marker.
            suffix: Closing placeholder marker.
            settings: Defaults source (default: from environment).

        Raises:
            ConfigurationError: If the resolved prefix or suffix is empty.
        """
        defaults = settings or RuleFactorySettings()

        self.registry = registry
        self.format = RuleFormat.from_value(
            format if format is not None else defaults.format
        )
        self.prefix = prefix if prefix is not None else defaults.prefix
        self.suffix = suffix if suffix is not None else defaults.suffix
        self.matcher = PlaceholderMatcher(self.prefix, self.suffix)
        self.locales: List[str] = registry.all()

    @classmethod
    def make(
        cls,
        rules: Mapping[Any, Any],
        format: Optional[RuleFormat] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
        locales: Optional[Iterable[str]] = None,
        *,
        registry: LocaleRegistry,
        settings: Optional[RuleFactorySettings] = None,
    ) -> Dict[Any, Any]:
        """Create a set of per-locale validation rules.

        Args:
            rules: The validation rules to be parsed.
            format: Placeholder rewrite convention.
            prefix: Opening placeholder marker.
            suffix: Closing placeholder marker.
            locales: Locales to expand for; all registry locales when None.
            registry: LocaleRegistry of known locales.
            settings: Defaults for omitted options.

        Returns:
            The parsed validation rules.

        Raises:
            InvalidLocaleError: If a given locale is not in the registry.
        """
        factory = cls(
            registry, format=format, prefix=prefix, suffix=suffix, settings=settings
        )
        factory.set_locales(locales)
        return factory.parse(rules)

    def set_locales(self, locales: Optional[Iterable[str]] = None) -> "RuleFactory":
        """Set the locales used for translating rule attributes.

        Args:
            locales: Locale codes to expand for. None selects every locale
                currently in the registry. An empty list is accepted and
                makes translatable rules expand to nothing.

        Returns:
            self, for chaining.

        Raises:
            InvalidLocaleError: If a locale is not in the registry. The
                previous active locales are kept.
            TypeError: If ``locales`` is a single string.
        """
        if locales is None:
            self.locales = self.registry.all()
            return self

        if isinstance(locales, str):
            raise TypeError("locales must be a list of locale codes, not a string")
        locales = list(locales)

        for locale in locales:
            if not self.registry.has(locale):
                logger.warning("invalid_locale", locale=locale)
                raise InvalidLocaleError(locale)

        self.locales = locales
        return self

    def parse(self, rules: Mapping[Any, Any]) -> Dict[Any, Any]:
        """Expand translatable rules for every active locale.

        Args:
            rules: Mapping of field key to rule spec.

        Returns:
            New mapping with translatable keys expanded per locale.
        """
        parsed: Dict[Any, Any] = {}

        for key, value in rules.items():
            if not self.matcher.is_translatable(key):
                parsed[key] = value
                continue

            for locale in self.locales:
                parsed[self.format_key(locale, key)] = self.format_rule(locale, value)

        logger.debug(
            "rules_parsed",
            input_count=len(rules),
            output_count=len(parsed),
            locales=self.locales,
        )
        return parsed

    def format_key(self, locale: str, key: str) -> str:
        return self.replace_placeholder(locale, key)

    def format_rule(self, locale: str, rule: Any) -> Any:
        """Rewrite placeholders inside a rule spec.

        Strings are rewritten clause by clause, lists and tuples element by
        element. Any other value is returned unchanged.
        """
        if isinstance(rule, str):
            if RULE_SEPARATOR in rule:
                return RULE_SEPARATOR.join(
                    self.replace_placeholder(locale, clause)
                    for clause in rule.split(RULE_SEPARATOR)
                )
            return self.replace_placeholder(locale, rule)
        if isinstance(rule, list):
            return [self.format_rule(locale, item) for item in rule]
        if isinstance(rule, tuple):
            return tuple(self.format_rule(locale, item) for item in rule)
        return rule

    def replace_placeholder(self, locale: str, value: str) -> str:
        return self.matcher.replace(value, lambda name: self.get_replacement(locale, name))

    def get_replacement(self, locale: str, name: str) -> str:
        if self.format == RuleFormat.KEY:
            return f"{name}:{locale}"
        return f"{locale}.{name}"
