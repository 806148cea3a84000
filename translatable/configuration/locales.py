"""Locale registry settings."""

from pydantic import Field

from translatable.configuration.base import TranslatableSettings


class LocalesSettings(TranslatableSettings):
    """Configuration for the locale registry and its tabular source.

    Environment Variables:
        TRANSLATABLE_MODEL_NAMESPACE: Prefix joined to the table name to form
            the source identifier (default: "")
        TRANSLATABLE_LOCALES_TABLE: Name of the table/collection holding locales
        TRANSLATABLE_LOCALES_TABLE_COLUMN: Column holding the locale code
        TRANSLATABLE_LOCALES_LANG_ID_COLUMN: Column holding the locale id
        TRANSLATABLE_LOCALE_SEPARATOR: Separator for composite locales (default: "-")
        TRANSLATABLE_LOCALE: Fallback active locale (default: "en")

    Example:
        ```python
        from translatable.services import get_settings

        settings = get_settings()
        table = settings.locales.source_name
        separator = settings.locales.locale_separator
        ```
    """

    model_namespace: str = Field(
        default="",
        alias="TRANSLATABLE_MODEL_NAMESPACE",
        description="Prefix joined to the locales table name",
    )
    locales_table: str | None = Field(
        default=None,
        alias="TRANSLATABLE_LOCALES_TABLE",
        description="Table or collection name holding the locales",
    )
    locales_table_column: str = Field(
        default="",
        alias="TRANSLATABLE_LOCALES_TABLE_COLUMN",
        description="Column holding the locale code",
    )
    locales_lang_id_column: str = Field(
        default="",
        alias="TRANSLATABLE_LOCALES_LANG_ID_COLUMN",
        description="Column holding the opaque locale id",
    )
    locale_separator: str = Field(
        default="-",
        alias="TRANSLATABLE_LOCALE_SEPARATOR",
        description="Separator between language and country in composite locales",
    )
    locale: str = Field(
        default="en",
        alias="TRANSLATABLE_LOCALE",
        description="Active locale used when no resolver supplies one",
    )

    @property
    def source_name(self) -> str | None:
        """Full source identifier, or None when no table is configured."""
        if not self.locales_table:
            return None
        return f"{self.model_namespace}{self.locales_table}"

    @property
    def is_source_configured(self) -> bool:
        return bool(
            self.source_name
            and self.locales_table_column
            and self.locales_lang_id_column
        )
