"""
FastValidator - declarative validation of nested data

Describe what valid data looks like with dotted patterns and rule strings:

    validator = Validator()
    validator.validate(payload, {
        "email": "required|email",
        "users.*.name": "required|string|max:64",
    })

and get readable messages back from `validator.get_report()`.

Includes:
- Wildcard path resolution over dicts and lists
- Built-in rules (presence, types, comparisons) and custom rule registration
- JSON message catalogs with placeholder substitution
- Pydantic schemas with declarative rule sets
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-validator"

from .contracts import RulePredicate, Schema, ValidatorRule
from .core import PLURALITY_MARKER, RuleToken, Violation
from .exceptions import (
    ConfigurationException,
    LanguageNotFoundException,
    MessageCatalogException,
    MissingMessageTemplateException,
    ValidationRuleException,
    ValidatorException,
)
from .utils.path_resolver import resolve_all, resolve_first
from .utils.serialisation import pretty_attribute
from .validator import Validator

__all__ = [
    "Validator",
    "RulePredicate",
    "Schema",
    "ValidatorRule",
    "PLURALITY_MARKER",
    "RuleToken",
    "Violation",
    "ConfigurationException",
    "LanguageNotFoundException",
    "MessageCatalogException",
    "MissingMessageTemplateException",
    "ValidationRuleException",
    "ValidatorException",
    "resolve_all",
    "resolve_first",
    "pretty_attribute",
]
