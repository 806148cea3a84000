"""Tests for translatable.i18n.resolvers and models modules."""

import pytest

from translatable.i18n import ContextLocaleResolver, Locale, StaticLocaleResolver
from translatable.i18n.resolvers import LocaleResolver
from tests.factories.i18n import make_locale_registry


@pytest.mark.unit
class TestStaticLocaleResolver:
    """Tests for StaticLocaleResolver."""

    def test_returns_configured_locale(self):
        assert StaticLocaleResolver("fr").get_locale() == "fr"

    def test_defaults_to_none(self):
        assert StaticLocaleResolver().get_locale() is None

    def test_set_locale(self):
        resolver = StaticLocaleResolver("fr")
        resolver.set_locale("de")
        assert resolver.get_locale() == "de"

    def test_satisfies_protocol(self):
        assert isinstance(StaticLocaleResolver(), LocaleResolver)


@pytest.mark.unit
class TestContextLocaleResolver:
    """Tests for ContextLocaleResolver."""

    def test_unset_returns_none(self):
        assert ContextLocaleResolver().get_locale() is None

    def test_use_locale_binds_and_restores(self):
        resolver = ContextLocaleResolver()
        with resolver.use_locale("fr"):
            assert resolver.get_locale() == "fr"
            with resolver.use_locale("de"):
                assert resolver.get_locale() == "de"
            assert resolver.get_locale() == "fr"
        assert resolver.get_locale() is None

    def test_registry_current_follows_context(self):
        resolver = ContextLocaleResolver()
        registry = make_locale_registry(resolver=resolver)

        assert registry.current() == 1
        with resolver.use_locale("de"):
            assert registry.current() == 3


@pytest.mark.unit
class TestLocale:
    """Tests for Locale model."""

    def test_language_and_region(self):
        locale = Locale(code="en-US", id=1)
        assert locale.language == "en"
        assert locale.region == "US"
        assert locale.is_country_based
        assert str(locale) == "en-US"

    def test_simple_locale(self):
        locale = Locale(code="fr", id="fr")
        assert locale.language == "fr"
        assert locale.region == ""
        assert not locale.is_country_based

    def test_custom_separator(self):
        locale = Locale(code="pt_BR", id=5, separator="_")
        assert locale.language == "pt"
        assert locale.region == "BR"
