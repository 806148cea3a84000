"""Placeholder token matching for translatable rule keys and values."""

import re
from typing import Callable, List, Pattern

from translatable.exceptions import ConfigurationError

KEY_SEPARATOR = "."


class PlaceholderMatcher:
    """Finds and rewrites ``prefix<name>suffix`` tokens.

    The captured name is one or more characters that are neither the key
    separator nor any character of the prefix or suffix, so adjacent or
    nested tokens resolve independently.

    Example:
        >>> matcher = PlaceholderMatcher("%", "%")
        >>> matcher.replace("%name%.first", lambda name: f"en.{name}")
        'en.name.first'
    """

    def __init__(self, prefix: str, suffix: str, separator: str = KEY_SEPARATOR):
        if not prefix or not suffix:
            raise ConfigurationError(
                "Rule placeholder prefix and suffix must not be empty."
            )
        self.prefix = prefix
        self.suffix = suffix
        self.separator = separator
        self.pattern = self._compile()

    def _compile(self) -> Pattern[str]:
        excluded = "".join(
            dict.fromkeys(self.separator + self.prefix + self.suffix)
        )
        return re.compile(
            f"{re.escape(self.prefix)}([^{re.escape(excluded)}]+){re.escape(self.suffix)}"
        )

    def is_translatable(self, key: object) -> bool:
        """True if ``key`` is a string containing both prefix and suffix."""
        return isinstance(key, str) and self.prefix in key and self.suffix in key

    def tokens(self, text: str) -> List[str]:
        """Captured placeholder names in ``text``, in order."""
        return self.pattern.findall(text)

    def replace(self, text: str, replacement: Callable[[str], str]) -> str:
        """Replace every token with ``replacement(captured_name)``."""
        return self.pattern.sub(lambda match: replacement(match.group(1)), text)
