import pytest

from fast_validator import MissingMessageTemplateException, PLURALITY_MARKER, Validator
from fast_validator.core.error_formatter import ErrorFormatter
from fast_validator.core.rule_registry import RuleRegistry
from fast_validator.core.violation import Violation


def test_rule_message_is_used_by_default(validator):
    validator.validate({}, {"first_name": "required"})
    assert validator.get_report() == {"errors": {"first_name": {"required": "The First name field is required."}}}


def test_attribute_message_takes_precedence(validator):
    validator.set_attribute_message("name", "Tell us your name.")
    validator.validate({}, {"name": "required", "email": "required"})

    errors = validator.get_report()["errors"]
    assert errors["name"]["required"] == "Tell us your name."
    assert errors["email"]["required"] == "The Email field is required."


def test_attribute_message_pattern_matches_concrete_attributes(validator):
    validator.set_attribute_message("users.*.email", "Every user needs an email.")
    validator.validate({"users": [{}, {"email": "a@b.io"}]}, {"users.*.email": "required"})
    assert validator.get_report() == {"errors": {"users.0.email": {"required": "Every user needs an email."}}}


def test_missing_template_raises(validator):
    validator.add_rule("odd", lambda v, data, pattern, rule, params: v.add_error(pattern, rule))
    validator.validate({}, {"n": "odd"})

    with pytest.raises(MissingMessageTemplateException) as exc_info:
        validator.get_report()

    assert exc_info.value.attribute == "n"
    assert exc_info.value.rule == "odd"
    assert exc_info.value.error_type == "missing_message_template"


def test_colon_replacements_are_prettified_and_others_are_not(validator):
    validator.set_rule_message("match", ":attribute must match :other (%other, other).")
    validator.add_error("password_repeat", "match", {":other": "password", "%other": "password", "other": "x"})
    assert validator.get_report()["errors"]["password_repeat"]["match"] == (
        "Password repeat must match Password (password, x)."
    )


def test_singular_alternative_for_plain_pattern(validator):
    validator.set_rule_message("required", "The :attribute !is|are missing")
    validator.validate({}, {"name": "required"})
    assert validator.get_report()["errors"]["name"]["required"] == "The Name is missing"


def test_wildcard_pattern_keeps_both_alternatives(validator):
    validator.set_rule_message("required", "The :attribute !is|are missing")
    validator.validate({"tags": [""]}, {"tags.*": "required"})
    assert validator.get_report()["errors"]["tags.0"]["required"] == "The Tags 0 !is|are missing"


def test_explicit_plurality_override(validator):
    validator.set_rule_message("required", "The :attribute !is|are missing")
    validator.add_error("name", "required", {PLURALITY_MARKER: False})
    assert validator.get_report()["errors"]["name"]["required"] == "The Name !is|are missing"


def test_last_violation_wins_for_same_attribute_and_rule(validator):
    validator.set_rule_message("min", ":attribute needs %min")
    validator.add_error("age", "min", {"%min": 1})
    validator.add_error("age", "min", {"%min": 18})
    assert validator.get_report() == {"errors": {"age": {"min": "Age needs 18"}}}


def test_prettifier_is_injectable():
    validator = Validator(prettifier=lambda value: str(value).upper())
    validator.validate({}, {"email": "required"})
    assert validator.get_report()["errors"]["email"]["required"] == "The EMAIL field is required."


def test_formatter_with_its_own_registry():
    registry = RuleRegistry()
    registry.set_rule_message("size", "The :attribute must have %size items.")
    formatter = ErrorFormatter(registry)

    report = formatter.format([Violation.create("cart.items", "size", {"%size": 3})])
    assert report == {"errors": {"cart.items": {"size": "The Cart items must have 3 items."}}}


def test_builtin_messages_render(validator):
    data = {"age": 10, "color": "blue", "first": "Ann", "type": "company"}
    validator.validate(data, {
        "age": "between:18,120",
        "color": "in:red,green",
        "last": "required_with:first",
        "vat": "required_if:type,company",
    })
    assert validator.get_report()["errors"] == {
        "age": {"between": "The Age must be between 18 and 120."},
        "color": {"in": "The selected Color is invalid, expected one of: red, green."},
        "last": {"required_with": "The Last field is required when First is present."},
        "vat": {"required_if": "The Vat field is required when Type is company."},
    }
