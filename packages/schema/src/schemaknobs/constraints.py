"""Constraint implementations checked by primitive and container schemas.

A constraint inspects a value that already has the right JSON type and
returns ``None`` when it holds, or the ``ErrorContext`` describing the
violation. Errors are built through the owning schema node so its
``error_message`` overrides apply.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from numbers import Number
from re import Pattern as RegexPattern
from typing import Any, TYPE_CHECKING

from .errors import ErrorCode, ErrorContext
from .exceptions import SchemaDefinitionError
from .values import is_number

if TYPE_CHECKING:
    from collections.abc import Callable

    from .schema import Schema
    from .values import Path


class Constraint(ABC):
    """Base class for all constraints."""

    @abstractmethod
    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        """Validate a value against this constraint.

        Args:
            value: Value to validate, already type-checked by the schema
            node: Schema node that owns this constraint
            path: Path of the value within the root value

        Returns:
            None if the constraint holds, otherwise the failure
        """
        pass


class Length(Constraint):
    """String length must be in specified range."""

    min_code = ErrorCode.STRING_TOO_SHORT
    max_code = ErrorCode.STRING_TOO_LONG
    min_param = "min_length"
    max_param = "max_length"

    def __init__(self, min: int | None = None, max: int | None = None):
        """Initialize length constraint.

        Args:
            min: Minimum length (inclusive)
            max: Maximum length (inclusive)
        """
        for name, bound in ((self.min_param, min), (self.max_param, max)):
            if bound is not None and (isinstance(bound, bool) or not isinstance(bound, int)):
                raise SchemaDefinitionError(
                    f"{name} must be an integer, got {bound!r}", context={name: bound}
                )
        if min is not None and min < 0:
            raise SchemaDefinitionError(f"{self.min_param} cannot be negative: {min}")
        if max is not None and max < 0:
            raise SchemaDefinitionError(f"{self.max_param} cannot be negative: {max}")
        if min is not None and max is not None and min > max:
            raise SchemaDefinitionError(
                f"{self.min_param} ({min}) cannot be greater than {self.max_param} ({max})",
                context={self.min_param: min, self.max_param: max},
            )
        self.min = min
        self.max = max

    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        length = len(value)
        if self.min is not None and length < self.min:
            return node.make_error(
                self.min_code, path, **{self.min_param: self.min, "length": length}
            )
        if self.max is not None and length > self.max:
            return node.make_error(
                self.max_code, path, **{self.max_param: self.max, "length": length}
            )
        return None


class ItemCount(Length):
    """Array must hold a number of items in specified range."""

    min_code = ErrorCode.ARRAY_MIN_ITEMS
    max_code = ErrorCode.ARRAY_MAX_ITEMS
    min_param = "min_items"
    max_param = "max_items"


class Range(Constraint):
    """Numeric value must be in specified range (inclusive)."""

    def __init__(self, min: Number | None = None, max: Number | None = None):
        for name, bound in (("min", min), ("max", max)):
            if bound is not None and not is_number(bound):
                raise SchemaDefinitionError(
                    f"{name} must be a finite number, got {bound!r}", context={name: bound}
                )
        if min is not None and max is not None and float(min) > float(max):  # type: ignore[arg-type]
            raise SchemaDefinitionError(
                f"min ({min}) cannot be greater than max ({max})",
                context={"min": min, "max": max},
            )
        self.min = min
        self.max = max

    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        if self.min is not None and value < self.min:
            return node.make_error(ErrorCode.NUMBER_MIN, path, min=self.min, value=value)
        if self.max is not None and value > self.max:
            return node.make_error(ErrorCode.NUMBER_MAX, path, max=self.max, value=value)
        return None


class Integer(Constraint):
    """Numeric value must have no fractional part."""

    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        if isinstance(value, float) and not value.is_integer():
            return node.make_error(ErrorCode.NUMBER_INTEGER, path, value=value)
        return None


class Pattern(Constraint):
    """String value must match regex pattern.

    Matching uses search semantics, so unanchored patterns may match a
    substring. Named formats (email, url, ...) carry their own default
    message but report the same ``string.pattern`` code.
    """

    def __init__(
        self,
        pattern: str | RegexPattern,
        format: str | None = None,
        message: str | None = None,
    ):
        """Initialize pattern constraint.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            format: Name of the predefined format this pattern implements
            message: Default template used when no override is declared
        """
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise SchemaDefinitionError(
                    f"Invalid pattern '{pattern}': {e}", context={"pattern": pattern}
                ) from e
        else:
            self.regex = pattern
        self.pattern_str = self.regex.pattern
        self.format = format
        self.message = message

    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        if self.regex.search(value):
            return None
        params: dict[str, Any] = {"pattern": self.pattern_str}
        if self.format:
            params["format"] = self.format
        return node.make_error(ErrorCode.STRING_PATTERN, path, template=self.message, **params)


class Custom(Constraint):
    """Custom constraint using a callable.

    The predicate returns ``None`` or a truthy value to accept the value,
    and a falsy value or an error message string to reject it. A predicate
    that raises is reported as a failure carrying the exception text.
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool | str | None],
        error_message: str = "Custom validation failed",
    ):
        self.predicate = predicate
        self.error_message = error_message

    def check(self, value: Any, node: Schema, path: Path) -> ErrorContext | None:
        try:
            outcome = self.predicate(value)
        except Exception as e:
            message = f"Custom validation error: {e!s}"
        else:
            if isinstance(outcome, str):
                message = outcome
            elif outcome is None or outcome:
                return None
            else:
                message = self.error_message
        return node.make_error(ErrorCode.custom(node.kind), path, message=message)
