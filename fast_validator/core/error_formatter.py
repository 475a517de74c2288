from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterable

from fast_validator.core.rule_registry import RuleRegistry
from fast_validator.core.violation import Violation
from fast_validator.exceptions.common_exceptions import MissingMessageTemplateException
from fast_validator.utils.serialisation import pretty_attribute


class ErrorFormatter:
    """
    Render violations into `{"errors": {attribute: {rule: message}}}`.

    Replacement keys are applied in order, by their first character:

    - `:key` - the value is passed through the prettifier, then substituted.
    - `!...` - the plurality marker. The key itself is a regex matching
      `!singular|plural` in the template. A truthy value keeps only the
      singular alternative; a falsy value leaves the template untouched.
    - anything else (usually `%key`) - substituted as is.
    """

    def __init__(self, registry: RuleRegistry, prettifier: Callable[[Any], str] = pretty_attribute) -> None:
        self.registry = registry
        self.prettifier = prettifier

    def render(self, violation: Violation) -> str:
        message = self.registry.get_message(violation.attribute, violation.rule)
        if message is None:
            raise MissingMessageTemplateException(violation.attribute, violation.rule)

        for search, replace in violation.replacements.items():
            if search.startswith(":"):
                message = message.replace(search, self.prettifier(replace))
            elif search.startswith("!"):
                if not replace:
                    continue
                message = re.sub(search, r"\1", message)
            else:
                message = message.replace(search, str(replace))
        return message

    def format(self, violations: Iterable[Violation]) -> Dict[str, Dict[str, Dict[str, str]]]:
        errors: Dict[str, Dict[str, str]] = {}
        for violation in violations:
            # Same attribute and rule: last one wins
            errors.setdefault(violation.attribute, {})[violation.rule] = self.render(violation)
        return {"errors": errors}
