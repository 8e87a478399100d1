"""schemaknobs - declarative schema validation for JSON-like values.

This package provides:
- Fluent schema nodes for strings, numbers, booleans, arrays and objects
- Union combinators (one_of, all_of, best_of) with explicit tie-break rules
- Structured, path-addressed errors with templated messages
- Transforms (trim, case normalization, coercion, custom) applied on success
- Schema construction from dict or YAML configuration
"""

from .builders import all_of, array, best_of, boolean, number, object, string, union
from .combinators import UnionMode, UnionSchema, code_scorer
from .containers import ArraySchema, ObjectField, ObjectSchema
from .engine import evaluate
from .errors import DEFAULT_MESSAGES, ErrorCode, ErrorContext, render_template
from .exceptions import (
    CoercionError,
    ParseError,
    SchemaDefinitionError,
    SchemaknobsError,
    SchemaValidationError,
)
from .factory import SchemaFactory, schema_factory
from .primitives import BooleanSchema, NumberSchema, StringSchema
from .result import ValidationResult
from .schema import Schema

__version__ = "0.1.0"

__all__ = [
    # Builders
    "string",
    "number",
    "boolean",
    "array",
    "object",
    "union",
    "all_of",
    "best_of",
    # Schema nodes
    "Schema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "ArraySchema",
    "ObjectSchema",
    "ObjectField",
    "UnionSchema",
    "UnionMode",
    "code_scorer",
    # Evaluation
    "evaluate",
    "ValidationResult",
    # Errors
    "ErrorCode",
    "ErrorContext",
    "DEFAULT_MESSAGES",
    "render_template",
    # Exceptions
    "SchemaknobsError",
    "SchemaDefinitionError",
    "SchemaValidationError",
    "ParseError",
    "CoercionError",
    # Factories
    "SchemaFactory",
    "schema_factory",
]
