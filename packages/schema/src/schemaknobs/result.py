"""Validation result type returned by every schema evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ErrorContext
from .exceptions import SchemaValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value against one schema.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. On success ``value`` holds the possibly transformed output.
    """

    valid: bool
    value: Any = None
    error: ErrorContext | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def unwrap(self) -> Any:
        """Get the validated value.

        Returns:
            The validated (and transformed) value

        Raises:
            SchemaValidationError: If validation failed
        """
        if not self.valid:
            raise SchemaValidationError(self.error)  # type: ignore[arg-type]
        return self.value

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result.

        Args:
            value: The validated value

        Returns:
            Successful ValidationResult
        """
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, error: ErrorContext) -> ValidationResult:
        """Create a failed validation result.

        Args:
            error: The failure description

        Returns:
            Failed ValidationResult
        """
        return cls(valid=False, error=error)
