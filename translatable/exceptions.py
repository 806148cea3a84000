"""Custom exceptions for the translatable package.

Provides specialized exceptions for locale source configuration problems
and locales that are not present in the registry.
"""

from typing import Optional


class TranslatableError(Exception):
    """Base exception for all translatable errors.

    Example:
        try:
            rules = RuleFactory.make(raw_rules, registry=registry)
        except TranslatableError as e:
            logger.error("rule_expansion_failed", error=str(e))
    """

    pass


class ConfigurationError(TranslatableError):
    """Raised when the locales source configuration is missing or unusable.

    Example:
        >>> LocaleRegistry(source, settings=LocalesSettings(locales_table=""))
        Traceback (most recent call last):
        ...
        ConfigurationError: Please make sure the locales source configuration is defined.
    """

    default_message = (
        "Please make sure the locales source configuration is defined "
        "(TRANSLATABLE_LOCALES_TABLE, TRANSLATABLE_LOCALES_TABLE_COLUMN and "
        "TRANSLATABLE_LOCALES_LANG_ID_COLUMN)."
    )

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidLocaleError(TranslatableError, ValueError):
    """Raised when a locale code is not defined in the registry.

    Attributes:
        locale: The offending locale code.
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"The locale [{locale}] is not defined in available locales."
        )
