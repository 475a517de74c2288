from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel

from fast_validator import config
from fast_validator.contracts.validator_rule import RulePredicate
from fast_validator.core.error_formatter import ErrorFormatter
from fast_validator.core.localization import install_catalog
from fast_validator.core.rule_registry import RuleRegistry
from fast_validator.core.rule_token import RuleDeclarations, parse_rules
from fast_validator.core.validation_rules import add_rule_set
from fast_validator.core.violation import Violation
from fast_validator.utils.path_resolver import WILDCARD, resolve_all, resolve_first
from fast_validator.utils.serialisation import pretty_attribute


class Validator:
    """
    Validate nested data against a rule set keyed by dotted patterns.

        validator = Validator()
        validator.validate(payload, {
            "email": "required|email",
            "users.*.age": "integer|between:18,120",
        })
        if validator.has_errors():
            return validator.get_report()   # {"errors": {"email": {"email": "..."}}}

    Violations accumulate across `validate` calls until `clear()` is called,
    and `validate` returns `has_errors()` over everything accumulated so far.
    Call `clear()` before reusing an instance for unrelated data.

    An instance is not thread-safe; use one per concurrent validation.
    """

    def __init__(
        self,
        lang: Optional[str] = None,
        lang_dir: Optional[str] = None,
        *,
        prettifier: Callable[[Any], str] = pretty_attribute,
    ) -> None:
        self.lang = lang or config.get_lang()
        self.lang_dir = lang_dir
        self.registry = RuleRegistry()
        self.formatter = ErrorFormatter(self.registry, prettifier)
        self._errors: list[Violation] = []
        self._pattern: Optional[str] = None
        self.reset()

    # --------------- configuration ---------------
    def set_language(self, lang: str, lang_dir: Optional[str] = None) -> "Validator":
        """
        Install the message catalog for `lang`.

        Raises:
            LanguageNotFoundException: If there is no catalog for the language.
        """
        install_catalog(self, lang, lang_dir)
        self.lang = lang
        self.lang_dir = lang_dir
        return self

    def add_rule(self, name: str, predicate: RulePredicate) -> "Validator":
        """
        Register a rule, replacing any rule with the same name.

            def in_list(validator, data, pattern, rule, parameters):
                for attribute, value in validator.get_values(data, pattern):
                    if value is None or value in parameters:
                        continue
                    validator.add_error(attribute, rule, {'%values': ', '.join(parameters)})

            validator.add_rule('in_list', in_list)
            validator.set_rule_message('in_list', 'The :attribute must be one of %values.')
        """
        self.registry.add_rule(name, predicate)
        return self

    def set_rule_message(self, name: str, message: str) -> "Validator":
        self.registry.set_rule_message(name, message)
        return self

    def set_attribute_message(self, pattern: str, message: str) -> "Validator":
        self.registry.set_attribute_message(pattern, message)
        return self

    def set_messages(
        self,
        rules: Optional[Dict[str, str]] = None,
        custom: Optional[Dict[str, str]] = None,
    ) -> "Validator":
        self.registry.set_messages(rules=rules, custom=custom)
        return self

    def reset(self) -> "Validator":
        """Back to the state of a new instance with the same language."""
        self.registry.clear()
        self.clear()

        add_rule_set(self)
        self.set_language(self.lang, self.lang_dir)
        return self

    def clear(self) -> "Validator":
        """Forget recorded violations. Rules and messages are kept."""
        self._errors = []
        return self

    # --------------- validation ---------------
    def validate(self, data: Any, rule_set: Mapping[str, RuleDeclarations]) -> bool:
        """
        Run every rule of `rule_set` against `data`.

        Returns:
            True if any violation has been recorded since the last `clear()`,
            including violations from earlier calls.
        """
        if isinstance(data, BaseModel):
            data = data.model_dump()
        elif data is None:
            data = {}

        for pattern, declarations in rule_set.items():
            for token in parse_rules(declarations):
                predicate = self.registry.get_rule(token.name)
                if predicate is None:
                    logging.debug(f"[VALIDATOR] Skipping unknown rule `{token.name}` for `{pattern}`")
                    continue

                # Restored afterwards so predicates may call validate() themselves
                previous, self._pattern = self._pattern, pattern
                try:
                    predicate(self, data, pattern, token.name, list(token.parameters))
                finally:
                    self._pattern = previous

        return self.has_errors()

    def add_error(self, attribute: str, rule: str, replacements: Optional[Dict[str, Any]] = None) -> None:
        """
        Record a violation.

        `:attribute` and the plurality marker are filled in automatically;
        entries in `replacements` override them.
        """
        singular = self._pattern is None or WILDCARD not in self._pattern.split(".")
        self._errors.append(Violation.create(attribute, rule, replacements, singular=singular))

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    @property
    def errors(self) -> Tuple[Violation, ...]:
        return tuple(self._errors)

    def get_report(self) -> Dict[str, Dict[str, Dict[str, str]]]:
        """
        Rendered messages for every recorded violation.

        Raises:
            MissingMessageTemplateException: If a violation has no template.
        """
        return self.formatter.format(self._errors)

    get_processed_errors = get_report

    # --------------- path helpers for rule authors ---------------
    @staticmethod
    def get_values(data: Any, pattern: str) -> Iterator[Tuple[str, Any]]:
        return resolve_all(data, pattern)

    @staticmethod
    def get_value(data: Any, pattern: str) -> Optional[Any]:
        return resolve_first(data, pattern)
