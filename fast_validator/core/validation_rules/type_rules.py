from __future__ import annotations

import json
import re
import uuid
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Sequence
from urllib.parse import urlparse

from fast_validator.contracts.validator_rule import ValidatorRule

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_ALPHA_DASH_RE = re.compile(r"^[\w-]+$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class StringValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, str)


class NumericValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        if isinstance(value, str):
            try:
                float(value)
            except ValueError:
                return False
            return value.strip() != ""
        return False


class IntegerValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, str) and _INTEGER_RE.match(value) is not None


class BooleanValidatorRule(ValidatorRule):
    accepted = (True, False, 0, 1, "0", "1", "true", "false")

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return any(value is item or (type(value) is type(item) and value == item) for item in self.accepted)


class ArrayValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, (list, tuple, Mapping))


class EmailValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, str) and _EMAIL_RE.match(value) is not None


class UrlValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if not isinstance(value, str):
            return False
        parsed = urlparse(value)
        return bool(parsed.scheme) and bool(parsed.netloc)


class AlphaValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, str) and value.isalpha()


class AlphaDashValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, str) and _ALPHA_DASH_RE.match(value) is not None


class AlphaNumericValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        return isinstance(value, str) and value.isalnum()


class DateValidatorRule(ValidatorRule):
    """`date` accepts ISO 8601 strings, `date:%d/%m/%Y` uses strptime."""

    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if isinstance(value, (date, datetime)):
            return True
        if not isinstance(value, str):
            return False
        date_format = ",".join(parameters)
        try:
            if date_format:
                datetime.strptime(value, date_format)
            else:
                datetime.fromisoformat(value)
        except ValueError:
            return False
        return True

    def replacements(self, parameters: Sequence[str], value: Any) -> dict:
        return {"%format": ",".join(parameters) or "ISO 8601"}


class JsonValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            json.loads(value)
        except ValueError:
            return False
        return True


class UuidValidatorRule(ValidatorRule):
    def passes(self, value: Any, parameters: Sequence[str], **_: Any) -> bool:
        if isinstance(value, uuid.UUID):
            return True
        try:
            uuid.UUID(str(value))
        except ValueError:
            return False
        return True
