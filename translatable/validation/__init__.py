"""Validation rule expansion.

Main components:
- placeholder: PlaceholderMatcher for prefix/suffix tokens
- rule_factory: RuleFactory expanding rules per locale
"""

from translatable.configuration import RuleFormat
from translatable.validation.placeholder import PlaceholderMatcher
from translatable.validation.rule_factory import RuleFactory

__all__ = ["PlaceholderMatcher", "RuleFactory", "RuleFormat"]
