"""Locale models for the i18n registry."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Locale:
    """A registered locale code and its opaque id.

    Attributes:
        code: Locale identifier (e.g., "en", "en-US").
        id: Value supplied by the locale source, or the code itself when
            the locale was added manually.
        separator: Separator between language and country parts.
    """

    code: str
    id: Any
    separator: str = "-"

    def __str__(self) -> str:
        return self.code

    @property
    def language(self) -> str:
        """Language part of the code (e.g., "en" from "en-US")."""
        return self.code.split(self.separator)[0]

    @property
    def region(self) -> str:
        """Region part of the code (e.g., "US" from "en-US"), or ""."""
        parts = self.code.split(self.separator, 1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def is_country_based(self) -> bool:
        return self.separator in self.code
