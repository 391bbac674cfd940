"""
Conversion exception hierarchy.

All exceptions inherit from ``FilterConversionError`` and provide
``to_dict()`` for API-friendly error responses.  Every error is terminal
for the conversion that raised it; no partial result is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ast import Target


class FilterConversionError(Exception):
    """Base exception for all filter conversion errors."""

    default_message = "Filter conversion failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
        }


class ConfigError(FilterConversionError):
    """Field policy settings are invalid."""

    default_message = "Invalid field policy settings."

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIG_ERROR",
            "message": self.message,
        }


class ConvertError(FilterConversionError):
    """
    The filter tree is structurally malformed.

    Signals a should-not-happen condition from the upstream parser: an
    unknown operator, a statement that is neither a clause nor a filter,
    or an operand of the wrong kind for its operator.
    """

    default_message = "Invalid filter.  Unable to convert."

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONVERT_ERROR",
            "message": self.message,
        }


class InvalidTargetError(FilterConversionError):
    """A target path segment contains characters the query DSL cannot carry."""

    default_message = "Invalid target encountered: "

    def __init__(self, target: Target) -> None:
        self.pointer = target.to_json_pointer()
        self.path = target.path
        self.data = target.path
        super().__init__(self.default_message + self.pointer)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_TARGET",
            "pointer": self.pointer,
            "path": list(self.path),
        }


class _FieldError(FilterConversionError):
    """Base for errors that concern a single document field."""

    code = "FIELD_ERROR"

    def __init__(self, field: str) -> None:
        self.field = field
        self.data = field
        super().__init__(self.default_message + field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "field": self.field,
            "message": self.message,
        }


class DeniedFieldError(_FieldError):
    """A referenced field is on the policy's deny list."""

    default_message = "Black listed field encountered: "
    code = "DENIED_FIELD"


class NonallowedFieldError(_FieldError):
    """An allow list is active and a referenced field is not on it."""

    default_message = "Non-white listed field encountered: "
    code = "NONALLOWED_FIELD"


class RequiredFieldError(_FieldError):
    """A field the policy requires was never referenced by the filter."""

    default_message = "Missing required field: "
    code = "REQUIRED_FIELD"
