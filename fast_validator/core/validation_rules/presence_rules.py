from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from fast_validator.core.validation_rules.helpers import expand, is_empty, other_value
from fast_validator.utils.serialisation import pretty_attribute

if TYPE_CHECKING:
    from fast_validator.validator import Validator


def required(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    for attribute, _, value in expand(data, pattern):
        if is_empty(value):
            validator.add_error(attribute, rule)


def present(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    for attribute, found, _ in expand(data, pattern):
        if not found:
            validator.add_error(attribute, rule)


def filled(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    for attribute, found, value in expand(data, pattern):
        if found and is_empty(value):
            validator.add_error(attribute, rule)


def nullable(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    """Marker only: every built-in non-presence rule already skips None."""


def _matches(value: Any, candidates: Sequence[str]) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        value = "true" if value else "false"
    return str(value) in candidates


def required_if(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    """`required_if:other,value1,value2` - required when `other` equals any of the values."""
    if not parameters:
        return
    other, *values = parameters
    for attribute, _, value in expand(data, pattern):
        if not _matches(other_value(data, pattern, attribute, other), values):
            continue
        if is_empty(value):
            validator.add_error(attribute, rule, {":other": other, "%values": ", ".join(values)})


def required_unless(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    if not parameters:
        return
    other, *values = parameters
    for attribute, _, value in expand(data, pattern):
        if _matches(other_value(data, pattern, attribute, other), values):
            continue
        if is_empty(value):
            validator.add_error(attribute, rule, {":other": other, "%values": ", ".join(values)})


def required_with(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    """Required when any of the other fields is filled."""
    for attribute, _, value in expand(data, pattern):
        if not any(not is_empty(other_value(data, pattern, attribute, other)) for other in parameters):
            continue
        if is_empty(value):
            validator.add_error(attribute, rule, {"%values": " / ".join(pretty_attribute(p) for p in parameters)})


def required_without(validator: "Validator", data: Any, pattern: str, rule: str, parameters: Sequence[str]) -> None:
    """Required when any of the other fields is empty."""
    for attribute, _, value in expand(data, pattern):
        if not any(is_empty(other_value(data, pattern, attribute, other)) for other in parameters):
            continue
        if is_empty(value):
            validator.add_error(attribute, rule, {"%values": " / ".join(pretty_attribute(p) for p in parameters)})
