"""Configuration module - public API.

Centralized configuration for the translatable package using Pydantic
BaseSettings with one section per concern.

Exports:
    Settings: Main settings class
    LocalesSettings: Locale registry source settings
    RuleFactorySettings: Rule factory default options
    RuleFormat: Placeholder rewrite conventions
"""

from translatable.configuration.locales import LocalesSettings
from translatable.configuration.rule_factory import RuleFactorySettings, RuleFormat
from translatable.configuration.settings import Settings

__all__ = ["Settings", "LocalesSettings", "RuleFactorySettings", "RuleFormat"]
