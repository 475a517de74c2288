from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Dict, Optional

from pydantic import BaseModel

from fast_validator.core.rule_token import RuleDeclarations
from fast_validator.exceptions.common_exceptions import ValidationRuleException

if TYPE_CHECKING:
    from fast_validator.validator import Validator


class Schema(BaseModel):
    """
    Pydantic model with a declarative rule set checked after parsing.

    Users declare rules via an inner Meta class:

        class SignupSchema(Schema):
            email: str
            tags: list[str] = []

            class Meta:
                rule_set = {
                    "email": "required|email",
                    "tags.*": "in:news,offers",
                }

    Field types are still enforced by pydantic; the rule set covers what
    types cannot express.
    """

    class Meta:
        rule_set: ClassVar[Dict[str, RuleDeclarations]] = {}  # override in subclasses

    def check_rules(self, validator: Optional["Validator"] = None, *, exclude_unset: bool = False) -> None:
        from fast_validator.validator import Validator

        rule_set = getattr(self.Meta, "rule_set", {}) or {}
        if not rule_set:
            return

        validator = validator or Validator()
        validator.clear()
        if validator.validate(self.model_dump(exclude_unset=exclude_unset), rule_set):
            raise ValidationRuleException(
                "schema rule validation failed",
                errors=validator.get_report()["errors"],
            )
