"""Core building blocks of the validator.

These modules are used by :class:`fast_validator.Validator` and are exported
for rule authors who need them directly.
"""

from .error_formatter import ErrorFormatter
from .rule_registry import RuleRegistry
from .rule_token import RuleToken, parse_rules
from .violation import PLURALITY_MARKER, Violation

__all__ = [
    "ErrorFormatter",
    "RuleRegistry",
    "RuleToken",
    "parse_rules",
    "PLURALITY_MARKER",
    "Violation",
]
