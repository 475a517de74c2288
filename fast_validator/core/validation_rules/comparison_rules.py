from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING, Any, Sequence

from fast_validator.contracts.validator_rule import ValidatorRule
from fast_validator.core.validation_rules.helpers import numeric_parameters, other_value, size_of, to_number
from fast_validator.utils.path_resolver import lookup, resolve_all

if TYPE_CHECKING:
    from fast_validator.validator import Validator


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _compiles(parameters: Sequence[str]) -> bool:
    expression = ",".join(parameters)
    if not expression:
        return False
    try:
        re.compile(expression)
    except re.error:
        return False
    return True


class InValidatorRule(ValidatorRule):
    """`in:a,b,c` - every item must be listed when the value is a list."""

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        items = value if isinstance(value, (list, tuple)) else [value]
        return all(_as_text(item) in parameters for item in items)

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%values": ", ".join(parameters)}


class NotInValidatorRule(InValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        items = value if isinstance(value, (list, tuple)) else [value]
        return not any(_as_text(item) in parameters for item in items)


class MinValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return numeric_parameters(parameters, 1) is not None

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        size = size_of(value)
        return size is not None and size >= to_number(parameters[0])

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%min": parameters[0]}


class MaxValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return numeric_parameters(parameters, 1) is not None

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        size = size_of(value)
        return size is not None and size <= to_number(parameters[0])

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%max": parameters[0]}


class BetweenValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return numeric_parameters(parameters, 2) is not None

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        size = size_of(value)
        return size is not None and to_number(parameters[0]) <= size <= to_number(parameters[1])

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%min": parameters[0], "%max": parameters[1]}


class SizeValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return numeric_parameters(parameters, 1) is not None

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        size = size_of(value)
        return size is not None and size == to_number(parameters[0])

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%size": parameters[0]}


class RegexValidatorRule(ValidatorRule):
    """`regex:^[a-z]+$` - commas in the expression are kept."""

    def accepts(self, parameters: Sequence[str]) -> bool:
        return _compiles(parameters)

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            return False
        return re.search(",".join(parameters), str(value)) is not None


class NotRegexValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return _compiles(parameters)

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            return False
        return re.search(",".join(parameters), str(value)) is None


class SameValidatorRule(ValidatorRule):
    def accepts(self, parameters: Sequence[str]) -> bool:
        return len(parameters) > 0 and parameters[0] != ""

    def passes(self, value: Any, parameters: Sequence[str], *, data: Any, attribute: str, pattern: str, **_: Any) -> bool:
        return value == other_value(data, pattern, attribute, parameters[0])

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {":other": parameters[0]}


class DifferentValidatorRule(SameValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **kwargs: Any) -> bool:
        return not super().passes(value, parameters, **kwargs)


class ConfirmedValidatorRule(ValidatorRule):
    """`password` must equal `password_confirmation`."""

    def passes(self, value: Any, parameters: Sequence[str], *, data: Any, attribute: str, **_: Any) -> bool:
        found, confirmation = lookup(data, f"{attribute}_confirmation")
        return found and value == confirmation


class AcceptedValidatorRule(ValidatorRule):
    implicit = True
    accepted = ("yes", "on", "1", "true")

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if value is True or (isinstance(value, int) and not isinstance(value, bool) and value == 1):
            return True
        return isinstance(value, str) and value.lower() in self.accepted


def distinct(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    """Every value matched by a wildcard pattern must be unique."""
    matches = [(attribute, value) for attribute, value in resolve_all(data, pattern) if value is not None]
    counts = Counter(_as_text(value) for _, value in matches)
    for attribute, value in matches:
        if counts[_as_text(value)] > 1:
            validator.add_error(attribute, rule)
