"""Structured validation failures.

An ``ErrorContext`` is the single failure record returned by a failed
validation. It carries a machine-readable, dot-namespaced ``code``, the
``path`` to the offending sub-value, a message template and the named
parameters used to render that template.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from .values import Path, PathSegment, format_path


class ErrorCode:
    """Error code taxonomy."""

    STRING_INVALID_TYPE = "string.invalid_type"
    STRING_TOO_SHORT = "string.too_short"
    STRING_TOO_LONG = "string.too_long"
    STRING_PATTERN = "string.pattern"
    STRING_CUSTOM = "string.custom"

    NUMBER_INVALID_TYPE = "number.invalid_type"
    NUMBER_MIN = "number.min"
    NUMBER_MAX = "number.max"
    NUMBER_INTEGER = "number.integer"
    NUMBER_CUSTOM = "number.custom"

    BOOLEAN_INVALID_TYPE = "boolean.invalid_type"
    BOOLEAN_CUSTOM = "boolean.custom"

    ARRAY_INVALID_TYPE = "array.invalid_type"
    ARRAY_MIN_ITEMS = "array.min_items"
    ARRAY_MAX_ITEMS = "array.max_items"

    OBJECT_INVALID_TYPE = "object.invalid_type"
    OBJECT_MISSING_FIELD = "object.missing_field"
    OBJECT_UNKNOWN_KEY = "object.unknown_key"

    UNION_NO_MATCH = "union.no_match"

    @staticmethod
    def invalid_type(kind: str) -> str:
        return f"{kind}.invalid_type"

    @staticmethod
    def custom(kind: str) -> str:
        return f"{kind}.custom"


_INVALID_TYPE_MESSAGE = "Expected {expected_type}, got {actual_type}"

DEFAULT_MESSAGES: dict[str, str] = {
    ErrorCode.STRING_INVALID_TYPE: _INVALID_TYPE_MESSAGE,
    ErrorCode.STRING_TOO_SHORT: "String must be at least {min_length} characters long",
    ErrorCode.STRING_TOO_LONG: "String must be at most {max_length} characters long",
    ErrorCode.STRING_PATTERN: "String must match pattern: {pattern}",
    ErrorCode.STRING_CUSTOM: "{message}",
    ErrorCode.NUMBER_INVALID_TYPE: _INVALID_TYPE_MESSAGE,
    ErrorCode.NUMBER_MIN: "Number must be greater than or equal to {min}",
    ErrorCode.NUMBER_MAX: "Number must be less than or equal to {max}",
    ErrorCode.NUMBER_INTEGER: "Expected integer value",
    ErrorCode.NUMBER_CUSTOM: "{message}",
    ErrorCode.BOOLEAN_INVALID_TYPE: _INVALID_TYPE_MESSAGE,
    ErrorCode.BOOLEAN_CUSTOM: "{message}",
    ErrorCode.ARRAY_INVALID_TYPE: _INVALID_TYPE_MESSAGE,
    ErrorCode.ARRAY_MIN_ITEMS: "Must have at least {min_items} items",
    ErrorCode.ARRAY_MAX_ITEMS: "Must have at most {max_items} items",
    ErrorCode.OBJECT_INVALID_TYPE: _INVALID_TYPE_MESSAGE,
    ErrorCode.OBJECT_MISSING_FIELD: "Field '{field}' is required",
    ErrorCode.OBJECT_UNKNOWN_KEY: "Unknown key: {key}",
    ErrorCode.UNION_NO_MATCH: "Value did not match any schema",
}

# Matches {name} tokens in message templates
TOKEN_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def default_message(code: str) -> str:
    """Get the default template for an error code."""
    return DEFAULT_MESSAGES.get(code, "Validation error")


def _format_param(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_template(template: str, params: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` tokens in a template.

    Tokens without a matching parameter are left verbatim.

    Args:
        template: Message template
        params: Named parameters

    Returns:
        Rendered message
    """
    def replacer(match: re.Match) -> str:
        name = match.group(1)
        if name in params:
            return _format_param(params[name])
        return match.group(0)

    return TOKEN_PATTERN.sub(replacer, template)


@dataclass(frozen=True)
class ErrorContext:
    """Immutable description of a validation failure.

    Attributes:
        code: Dot-namespaced error code, e.g. ``string.too_short``
        path: Field names and array indices leading to the failing value
        message_template: Template rendered lazily with ``params``
        params: Named values available to the template
    """

    code: str
    path: Path = ()
    message_template: str = ""
    params: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if not self.message_template:
            object.__setattr__(self, "message_template", default_message(self.code))

    @property
    def message(self) -> str:
        """Human-readable message with parameters substituted."""
        return render_template(self.message_template, self.params)

    @property
    def path_string(self) -> str:
        return format_path(self.path)

    def with_path_prefix(self, *segments: PathSegment) -> ErrorContext:
        """Return a copy whose path is prefixed by ``segments``."""
        return replace(self, path=tuple(segments) + self.path, params=dict(self.params))

    def with_template(self, template: str) -> ErrorContext:
        """Return a copy using a different message template."""
        return replace(self, message_template=template, params=dict(self.params))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary.

        Returns:
            Dictionary with code, path, message, message_template and params
        """
        return {
            "code": self.code,
            "path": list(self.path),
            "message": self.message,
            "message_template": self.message_template,
            "params": dict(self.params),
        }

    def __str__(self) -> str:
        return self.message
