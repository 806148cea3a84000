"""
Factory functions for dependency injection.

Provides process-scoped providers for settings and the locale registry,
and a per-call RuleFactory builder wired to them.
"""

from functools import lru_cache
from typing import Optional, Sequence

from translatable.configuration import RuleFormat, Settings
from translatable.i18n import LocaleRegistry, LocaleSource, create_locale_registry
from translatable.i18n.resolvers import LocaleResolver
from translatable.validation import RuleFactory


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def build_locale_registry(
    source: LocaleSource,
    resolver: Optional[LocaleResolver] = None,
    settings: Optional[Settings] = None,
) -> LocaleRegistry:
    """Build a loaded LocaleRegistry from the application settings."""
    settings = settings or get_settings()
    return create_locale_registry(
        source=source, settings=settings.locales, resolver=resolver
    )


def build_rule_factory(
    registry: LocaleRegistry,
    format: Optional[RuleFormat] = None,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    locales: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> RuleFactory:
    """
    Build a short-lived RuleFactory with defaults from the settings.

    Usage:
        factory = build_rule_factory(registry, locales=["en", "fr"])
        rules = factory.parse(raw_rules)
    """
    settings = settings or get_settings()
    factory = RuleFactory(
        registry,
        format=format,
        prefix=prefix,
        suffix=suffix,
        settings=settings.rule_factory,
    )
    return factory.set_locales(locales)
