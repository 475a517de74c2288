from typing import Optional

from fast_validator.utils.serialisation import get_exception_error_type


class ValidatorException(Exception):
    def __init__(self,
        message: str,
        *,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Base exception for errors raised by the validator itself (never for violations).

        Args:
            message: The error message.
            error_type: The error type (if not provided, it will be inferred from the exception class name).
            data: Extra context about the failure.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error_type": self.error_type, "message": self.message, "data": self.data}


class ConfigurationException(ValidatorException):
    """The validator is set up in a way that cannot work (catalogs, templates)."""


class LanguageNotFoundException(ConfigurationException):
    def __init__(self, lang: str, path: str):
        self.lang = lang
        self.path = path
        super().__init__(f"[CATALOG] No message catalog for language `{lang}`: {path}", data={"lang": lang, "path": path})


class MessageCatalogException(ConfigurationException):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"[CATALOG] Unable to load message catalog {path}: {reason}", data={"path": path})


class MissingMessageTemplateException(ConfigurationException):
    def __init__(self, attribute: str, rule: str):
        self.attribute = attribute
        self.rule = rule
        super().__init__(
            f"No message template for rule `{rule}` (attribute `{attribute}`)",
            data={"attribute": attribute, "rule": rule},
        )


class ValidationRuleException(ValueError):
    """
    Raised by `Schema.check_rules` when the data violates the declared rule set.

    Carries the rendered report in `errors` (`{attribute: {rule: message}}`).
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: str = "rule_error",
        errors: dict[str, dict[str, str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.errors = errors or {}


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
