from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from fast_validator.utils.path_resolver import WILDCARD, pattern_to_regex

if TYPE_CHECKING:
    from fast_validator.contracts.validator_rule import RulePredicate


class RuleRegistry:
    """Rule predicates and message templates owned by one validator."""

    def __init__(self) -> None:
        self.rules: Dict[str, "RulePredicate"] = {}
        self.messages: Dict[str, Dict[str, str]] = {"rules": {}, "custom": {}}

    def clear(self) -> None:
        self.rules = {}
        self.messages = {"rules": {}, "custom": {}}

    # --------------- rules ---------------
    def add_rule(self, name: str, predicate: "RulePredicate") -> None:
        self.rules[name] = predicate

    def has_rule(self, name: str) -> bool:
        return name in self.rules

    def get_rule(self, name: str) -> Optional["RulePredicate"]:
        return self.rules.get(name)

    # --------------- messages ---------------
    def set_rule_message(self, name: str, message: str) -> None:
        self.messages["rules"][name] = message

    def set_attribute_message(self, pattern: str, message: str) -> None:
        self.messages["custom"][pattern] = message

    def set_messages(
        self,
        rules: Optional[Dict[str, str]] = None,
        custom: Optional[Dict[str, str]] = None,
    ) -> None:
        for name, message in (rules or {}).items():
            self.set_rule_message(name, message)
        for pattern, message in (custom or {}).items():
            self.set_attribute_message(pattern, message)

    def get_message(self, attribute: str, rule: str) -> Optional[str]:
        """
        Template for a violation.

        Lookup order: custom message for the exact attribute, custom messages
        keyed by a wildcard pattern matching the attribute (registration order),
        then the rule message.
        """
        custom = self.messages["custom"]
        if attribute in custom:
            return custom[attribute]

        for pattern, message in custom.items():
            if WILDCARD in pattern.split(".") and pattern_to_regex(pattern, "[^.]+").match(attribute):
                return message

        return self.messages["rules"].get(rule)
