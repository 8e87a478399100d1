"""Array and object schemas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .constraints import ItemCount
from .exceptions import ParseError
from .schema import Schema


class ArraySchema(Schema):
    """Schema for arrays whose elements all match one item schema."""

    kind = "array"

    def __init__(self, item_schema: Schema):
        super().__init__()
        self.item_schema = item_schema
        self.item_count = ItemCount()

    def min_items(self, count: int) -> ArraySchema:
        self.item_count = ItemCount(count, self.item_count.max)
        return self

    def max_items(self, count: int) -> ArraySchema:
        self.item_count = ItemCount(self.item_count.min, count)
        return self

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["items"] = self.item_schema.to_dict()
        if self.item_count.min is not None:
            data["min_items"] = self.item_count.min
        if self.item_count.max is not None:
            data["max_items"] = self.item_count.max
        return data


@dataclass(frozen=True)
class ObjectField:
    """A declared object field."""

    name: str
    schema: Schema
    required: bool = True


class ObjectSchema(Schema):
    """Schema for objects with declared fields.

    Output objects contain only declared fields, in declaration order.
    Undeclared keys are rejected in strict mode and silently dropped
    otherwise.
    """

    kind = "object"

    def __init__(self) -> None:
        super().__init__()
        self.fields: dict[str, ObjectField] = {}
        self.is_strict = False

    def field(self, name: str, schema: Schema, required: bool = True) -> ObjectSchema:
        """Declare a field (fluent API).

        Args:
            name: Field name
            schema: Schema the field value must satisfy
            required: Whether an absent field is an error

        Returns:
            Self for chaining
        """
        self.fields[name] = ObjectField(name, schema, required)
        return self

    def optional_field(self, name: str, schema: Schema) -> ObjectSchema:
        return self.field(name, schema, required=False)

    def strict(self) -> ObjectSchema:
        """Reject keys that are not declared fields."""
        self.is_strict = True
        return self

    def parse_as(self, value: Any, target: type) -> Any:
        """Validate a value and build an instance of ``target`` from it.

        Uses ``target.from_dict(data)`` when available, otherwise
        ``target(**data)``.

        Args:
            value: Object value to validate
            target: Class to instantiate from the validated fields

        Returns:
            Instance of target

        Raises:
            SchemaValidationError: If validation fails
            ParseError: If the target cannot be built from the data
        """
        data: Mapping[str, Any] = self.parse(value)
        try:
            if hasattr(target, "from_dict"):
                return target.from_dict(dict(data))
            return target(**data)
        except (TypeError, ValueError, KeyError) as e:
            raise ParseError(
                f"Failed to parse object into {target.__name__}: {e}",
                context={"target": target.__name__},
            ) from e

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.is_strict:
            data["strict"] = True
        fields: dict[str, Any] = {}
        for name, object_field in self.fields.items():
            field_data = object_field.schema.to_dict()
            if not object_field.required:
                field_data["required"] = False
            fields[name] = field_data
        data["fields"] = fields
        return data
