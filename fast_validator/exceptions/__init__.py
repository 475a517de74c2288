"""Exceptions raised by the validator."""

from .common_exceptions import (
    ValidatorException,
    ConfigurationException,
    LanguageNotFoundException,
    MessageCatalogException,
    MissingMessageTemplateException,
    ValidationRuleException,
    EnvInvalidException,
)


__all__ = [
    "ValidatorException",
    "ConfigurationException",
    "LanguageNotFoundException",
    "MessageCatalogException",
    "MissingMessageTemplateException",
    "ValidationRuleException",
    "EnvInvalidException",
]
