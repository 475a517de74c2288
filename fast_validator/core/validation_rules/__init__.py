"""Built-in rules registered on every Validator by `reset()`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .comparison_rules import (
    AcceptedValidatorRule,
    BetweenValidatorRule,
    ConfirmedValidatorRule,
    DifferentValidatorRule,
    InValidatorRule,
    MaxValidatorRule,
    MinValidatorRule,
    NotInValidatorRule,
    NotRegexValidatorRule,
    RegexValidatorRule,
    SameValidatorRule,
    SizeValidatorRule,
    distinct,
)
from .presence_rules import (
    filled,
    nullable,
    present,
    required,
    required_if,
    required_unless,
    required_with,
    required_without,
)
from .type_rules import (
    AlphaDashValidatorRule,
    AlphaNumericValidatorRule,
    AlphaValidatorRule,
    ArrayValidatorRule,
    BooleanValidatorRule,
    DateValidatorRule,
    EmailValidatorRule,
    IntegerValidatorRule,
    JsonValidatorRule,
    NumericValidatorRule,
    StringValidatorRule,
    UrlValidatorRule,
    UuidValidatorRule,
)

if TYPE_CHECKING:
    from fast_validator.validator import Validator


def add_rule_set(validator: "Validator") -> None:
    """Register the built-in rules. Safe to call repeatedly."""
    rules = {
        # presence
        "required": required,
        "present": present,
        "filled": filled,
        "nullable": nullable,
        "required_if": required_if,
        "required_unless": required_unless,
        "required_with": required_with,
        "required_without": required_without,
        # types
        "string": StringValidatorRule(),
        "numeric": NumericValidatorRule(),
        "integer": IntegerValidatorRule(),
        "boolean": BooleanValidatorRule(),
        "array": ArrayValidatorRule(),
        "email": EmailValidatorRule(),
        "url": UrlValidatorRule(),
        "alpha": AlphaValidatorRule(),
        "alpha_dash": AlphaDashValidatorRule(),
        "alpha_numeric": AlphaNumericValidatorRule(),
        "date": DateValidatorRule(),
        "json": JsonValidatorRule(),
        "uuid": UuidValidatorRule(),
        # comparison
        "in": InValidatorRule(),
        "not_in": NotInValidatorRule(),
        "min": MinValidatorRule(),
        "max": MaxValidatorRule(),
        "between": BetweenValidatorRule(),
        "size": SizeValidatorRule(),
        "regex": RegexValidatorRule(),
        "not_regex": NotRegexValidatorRule(),
        "same": SameValidatorRule(),
        "different": DifferentValidatorRule(),
        "confirmed": ConfirmedValidatorRule(),
        "accepted": AcceptedValidatorRule(),
        "distinct": distinct,
    }
    for name, predicate in rules.items():
        validator.add_rule(name, predicate)


__all__ = [
    "add_rule_set",
]
