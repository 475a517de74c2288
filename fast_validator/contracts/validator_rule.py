from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Protocol, Sequence

from fast_validator.utils.path_resolver import resolve_all

if TYPE_CHECKING:
    from fast_validator.validator import Validator


class RulePredicate(Protocol):
    """
    Anything registered with `Validator.add_rule`.

    Called once per rule token with the full data and the declared pattern.
    It reports failures through `validator.add_error` and returns nothing.
    """

    def __call__(
        self,
        validator: "Validator",
        data: Any,
        pattern: str,
        rule: str,
        parameters: Sequence[str],
    ) -> None: ...


class ValidatorRule(ABC):
    """
    Contract for class-based rules checking one value at a time.

    Subclasses implement `passes`; resolving the pattern and recording
    violations is done here. Values that are absent (None) are skipped
    unless `implicit` is set, so rules like `email` stay optional.
    Declarations whose parameters `accepts` rejects are skipped like unknown rules.
    """

    implicit: bool = False

    def __call__(
        self,
        validator: "Validator",
        data: Any,
        pattern: str,
        rule: str,
        parameters: Sequence[str],
    ) -> None:
        if not self.accepts(parameters):
            logging.debug(f"[VALIDATOR] Skipping `{rule}` for `{pattern}`: unusable parameters {list(parameters)}")
            return
        for attribute, value in resolve_all(data, pattern):
            if value is None and not self.implicit:
                continue
            if self.passes(value, parameters, validator=validator, data=data, attribute=attribute, pattern=pattern):
                continue
            validator.add_error(attribute, rule, self.replacements(parameters, value))

    @abstractmethod
    def passes(
        self,
        value: Any,
        parameters: Sequence[str],
        *,
        validator: "Validator",
        data: Any,
        attribute: str,
        pattern: str,
    ) -> bool:
        """
        Check a single resolved value.

        Args:
            value: The value at the resolved attribute.
            parameters: Parameters given in the rule declaration (`rule:a,b`).
            validator: The validator running the rule.
            data: The full data being validated.
            attribute: Concrete path of the value.
            pattern: The declared pattern the attribute was resolved from.
        """
        raise NotImplementedError

    def accepts(self, parameters: Sequence[str]) -> bool:
        """Whether the declaration's parameters can be used by `passes`."""
        return True

    def replacements(self, parameters: Sequence[str], value: Any) -> Dict[str, Any]:
        """Extra placeholders for the message template."""
        return {}
