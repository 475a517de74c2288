"""Contracts for extending the validator: rule predicates and schemas."""

from .schema import Schema
from .validator_rule import RulePredicate, ValidatorRule

__all__ = [
    "RulePredicate",
    "Schema",
    "ValidatorRule",
]
