"""String, number and boolean schemas.
"""

from __future__ import annotations

from typing import Any, Callable

from .constraints import Constraint, Custom, Integer, Length, Pattern, Range
from .exceptions import SchemaDefinitionError
from .schema import Schema

# Named presets for StringSchema.format(); each fills the single pattern slot
FORMATS: dict[str, tuple[str, str]] = {
    "email": (
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
        "Invalid email address",
    ),
    "url": (
        r"^https?://[\w\-]+(\.[\w\-]+)+[/#?]?.*$",
        "Invalid URL format",
    ),
    "uuid": (
        r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
        "Invalid UUID format",
    ),
    "ip": (
        r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
        r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$",
        "Invalid IP address format",
    ),
}


class _PrimitiveSchema(Schema):
    """Shared plumbing for kinds that accept custom predicates."""

    def __init__(self) -> None:
        super().__init__()
        self.custom_checks: list[Custom] = []
        self.coerce_enabled = False

    def custom(
        self,
        predicate: Callable[[Any], bool | str | None],
        message: str = "Custom validation failed",
    ) -> _PrimitiveSchema:
        """Add a predicate checked after all built-in constraints.

        Args:
            predicate: Returns None or a truthy value to accept, a falsy
                value or a message string to reject
            message: Message used when the predicate returns a falsy value

        Returns:
            Self for chaining
        """
        self.custom_checks.append(Custom(predicate, message))
        return self

    def constraints(self) -> list[Constraint]:
        """Constraints in evaluation order."""
        return list(self.custom_checks)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.coerce_enabled:
            data["coerce"] = True
        return data


class StringSchema(_PrimitiveSchema):
    """Schema for string values.

    Checks run in a fixed order regardless of declaration order: length
    bounds, then pattern/format, then custom predicates.
    """

    kind = "string"

    def __init__(self) -> None:
        super().__init__()
        self.length = Length()
        self.pattern_check: Pattern | None = None

    def min_length(self, length: int) -> StringSchema:
        self.length = Length(length, self.length.max)
        return self

    def max_length(self, length: int) -> StringSchema:
        self.length = Length(self.length.min, length)
        return self

    def pattern(self, pattern: str) -> StringSchema:
        """Require strings to match a regular expression.

        Replaces any previously set pattern or format.
        """
        self.pattern_check = Pattern(pattern)
        return self

    def format(self, name: str) -> StringSchema:
        """Require strings to match a predefined format.

        Args:
            name: One of email, url, uuid, ip

        Returns:
            Self for chaining

        Raises:
            SchemaDefinitionError: If the format is unknown
        """
        if name not in FORMATS:
            raise SchemaDefinitionError(
                f"Unknown string format: {name}",
                context={"format": name, "available": sorted(FORMATS)},
            )
        regex, message = FORMATS[name]
        self.pattern_check = Pattern(regex, format=name, message=message)
        return self

    def email(self) -> StringSchema:
        return self.format("email")

    def url(self) -> StringSchema:
        return self.format("url")

    def uuid(self) -> StringSchema:
        return self.format("uuid")

    def ip(self) -> StringSchema:
        return self.format("ip")

    def constraints(self) -> list[Constraint]:
        ordered: list[Constraint] = [self.length]
        if self.pattern_check is not None:
            ordered.append(self.pattern_check)
        return ordered + super().constraints()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.length.min is not None:
            data["min_length"] = self.length.min
        if self.length.max is not None:
            data["max_length"] = self.length.max
        if self.pattern_check is not None:
            if self.pattern_check.format:
                data["format"] = self.pattern_check.format
            else:
                data["pattern"] = self.pattern_check.pattern_str
        return data


class NumberSchema(_PrimitiveSchema):
    """Schema for numeric values.

    With ``coerce()`` numeric strings are parsed before type checking.
    Checks run as: range bounds, then the integer format, then custom
    predicates.
    """

    kind = "number"

    def __init__(self) -> None:
        super().__init__()
        self.range = Range()
        self.integer_only = False

    def min(self, value: float) -> NumberSchema:
        self.range = Range(value, self.range.max)
        return self

    def max(self, value: float) -> NumberSchema:
        self.range = Range(self.range.min, value)
        return self

    def integer(self) -> NumberSchema:
        self.integer_only = True
        return self

    def coerce(self) -> NumberSchema:
        self.coerce_enabled = True
        return self

    def constraints(self) -> list[Constraint]:
        ordered: list[Constraint] = [self.range]
        if self.integer_only:
            ordered.append(Integer())
        return ordered + super().constraints()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.range.min is not None:
            data["min"] = self.range.min
        if self.range.max is not None:
            data["max"] = self.range.max
        if self.integer_only:
            data["integer"] = True
        return data


class BooleanSchema(_PrimitiveSchema):
    """Schema for boolean values."""

    kind = "boolean"

    def coerce(self) -> BooleanSchema:
        """Accept strings such as "true"/"false", "yes"/"no" and "1"/"0"."""
        self.coerce_enabled = True
        return self
