"""Shorthand constructors for schema nodes.

Example:
    ```python
    from schemaknobs import array, number, object, string

    user = object({
        "name": string().trim().min_length(1),
        "age": number().integer().min(0),
        "tags": array(string()).max_items(5),
    }).strict()
    ```
"""

from __future__ import annotations

from typing import Mapping

from .combinators import Scorer, UnionMode, UnionSchema
from .containers import ArraySchema, ObjectSchema
from .primitives import BooleanSchema, NumberSchema, StringSchema
from .schema import Schema


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def array(item_schema: Schema) -> ArraySchema:
    return ArraySchema(item_schema)


def object(fields: Mapping[str, Schema] | None = None) -> ObjectSchema:  # noqa: A001
    """Create an object schema, declaring ``fields`` as required fields."""
    schema = ObjectSchema()
    for name, field_schema in (fields or {}).items():
        schema.field(name, field_schema)
    return schema


def union(*variants: Schema) -> UnionSchema:
    """First matching variant wins; the last error is reported on failure."""
    return UnionSchema(list(variants), UnionMode.ONE_OF)


def all_of(*variants: Schema) -> UnionSchema:
    """Every variant must match; the last variant's output is returned."""
    return UnionSchema(list(variants), UnionMode.ALL_OF)


def best_of(*variants: Schema, scorer: Scorer | None = None) -> UnionSchema:
    """First matching variant wins; the lowest-scored error is reported on failure."""
    return UnionSchema(list(variants), UnionMode.BEST_OF, scorer)
