"""Rule factory settings."""

from enum import IntEnum
from typing import Any

from pydantic import Field, field_validator

from translatable.configuration.base import TranslatableSettings


class RuleFormat(IntEnum):
    """Placeholder rewrite conventions.

    ARRAY rewrites ``%name%`` to ``en.name``; KEY rewrites it to ``name:en``.
    """

    ARRAY = 1
    KEY = 2

    @classmethod
    def from_value(cls, value: Any) -> "RuleFormat":
        """Convert a config value ("array", "KEY", 1, "2", ...) to RuleFormat.

        Raises:
            ValueError: If the value does not name a known format.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip()
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name.upper()]
            except KeyError as e:
                raise ValueError(f"Unsupported rule format: {value}") from e
        return cls(value)


class RuleFactorySettings(TranslatableSettings):
    """Defaults for RuleFactory options the caller leaves unset.

    Environment Variables:
        TRANSLATABLE_RULE_FORMAT: "array" or "key" (default: array)
        TRANSLATABLE_RULE_PREFIX: Placeholder prefix (default: "%")
        TRANSLATABLE_RULE_SUFFIX: Placeholder suffix (default: "%")
    """

    format: RuleFormat = Field(
        default=RuleFormat.ARRAY,
        alias="TRANSLATABLE_RULE_FORMAT",
        description="Placeholder rewrite convention",
    )
    prefix: str = Field(
        default="%",
        alias="TRANSLATABLE_RULE_PREFIX",
        description="Opening placeholder marker",
    )
    suffix: str = Field(
        default="%",
        alias="TRANSLATABLE_RULE_SUFFIX",
        description="Closing placeholder marker",
    )

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> RuleFormat:
        """Accept format names as well as their numeric values."""
        return RuleFormat.from_value(v)
