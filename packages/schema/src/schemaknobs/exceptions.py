"""Exception hierarchy for schemaknobs.

Validation itself never raises for bad input: failures are returned as
``ErrorContext`` values inside a ``ValidationResult``. The exceptions here
cover the programmer-facing side of the library:

- Building a schema with contradictory or malformed settings
- Asking for a validated value with ``parse()``/``unwrap()`` when there is none
- Converting validated data into a target type

Example:
    ```python
    from schemaknobs import number
    from schemaknobs.exceptions import SchemaDefinitionError, SchemaValidationError

    try:
        number().min(10).max(1)
    except SchemaDefinitionError as e:
        print(e.context)

    try:
        number().parse("nope")
    except SchemaValidationError as e:
        print(e.error.code)  # number.invalid_type
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .errors import ErrorContext


class SchemaknobsError(Exception):
    """Base exception for all schemaknobs errors.

    Attributes:
        context: Dictionary containing contextual information about the error
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
        """
        super().__init__(message)
        self.context = context or {}


class SchemaDefinitionError(SchemaknobsError, ValueError):
    """Raised when a schema is constructed with invalid settings.

    Common scenarios include:
    - Negative or inverted length/range bounds
    - A regular expression that does not compile
    - An unknown schema type, format or transform name in configuration
    """

    pass


class SchemaValidationError(SchemaknobsError):
    """Raised when a caller demands a validated value that failed validation.

    Attributes:
        error: The ErrorContext describing the failure
    """

    def __init__(self, error: ErrorContext):
        super().__init__(
            error.message,
            context={"code": error.code, "path": error.path_string},
        )
        self.error = error


class ParseError(SchemaknobsError):
    """Raised when validated data cannot be converted into a target type."""

    pass


class CoercionError(SchemaknobsError):
    """Raised when a value cannot be coerced to the requested type."""

    pass
