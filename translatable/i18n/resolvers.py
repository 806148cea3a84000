"""Active locale resolvers.

A resolver supplies the caller's current locale string to
``LocaleRegistry.current()``. Returning None or "" lets the registry fall
back to its configured default locale.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger(component="i18n.resolver")

_current_locale: ContextVar[Optional[str]] = ContextVar(
    "translatable_current_locale", default=None
)


@runtime_checkable
class LocaleResolver(Protocol):
    """Anything that can report the active locale."""

    def get_locale(self) -> Optional[str]: ...


class StaticLocaleResolver:
    """Resolver returning a fixed locale, settable at runtime."""

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale

    def get_locale(self) -> Optional[str]:
        return self.locale

    def set_locale(self, locale: Optional[str]) -> None:
        self.locale = locale


class ContextLocaleResolver:
    """Resolver backed by a context variable.

    The active locale follows the current execution context, so concurrent
    requests each see their own value.

    Usage:
        resolver = ContextLocaleResolver()

        with resolver.use_locale("fr"):
            registry.current()  # "fr" (or its mapped id)
    """

    def get_locale(self) -> Optional[str]:
        return _current_locale.get()

    def set_locale(self, locale: Optional[str]) -> None:
        _current_locale.set(locale)

    @contextmanager
    def use_locale(self, locale: Optional[str]) -> Generator[None, None, None]:
        """Bind ``locale`` as the active locale within the block."""
        token = _current_locale.set(locale)
        logger.debug("locale_bound", locale=locale)
        try:
            yield
        finally:
            _current_locale.reset(token)
