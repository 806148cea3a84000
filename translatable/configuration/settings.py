"""Translatable configuration settings - main aggregator."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from translatable.configuration.locales import LocalesSettings
from translatable.configuration.rule_factory import RuleFactorySettings


class Settings(BaseSettings):
    """Translatable configuration settings - main aggregator.

    Aggregates the settings sections into a single configuration object:

    - **locales**: locale registry source and separator
    - **rule_factory**: default rule format and placeholder markers

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; "production" switches logs to JSON

    Example:
        ```python
        from translatable.services import get_settings

        settings = get_settings()
        prefix = settings.rule_factory.prefix
        separator = settings.locales.locale_separator
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = Field(default="development")

    locales: LocalesSettings
    rule_factory: RuleFactorySettings

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "locales": LocalesSettings,
            "rule_factory": RuleFactorySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
