"""Schema node base class with fluent API.

Every schema kind shares the behaviour defined here: the ``optional``
flag, the ordered transform chain, per-node error message overrides and
the ``validate``/``parse`` entry points. Kind-specific settings live in
the subclasses; the validation algorithm itself lives in ``engine``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from . import transforms as builtin_transforms
from .engine import evaluate
from .errors import ErrorContext, default_message
from .result import ValidationResult
from .transforms import Transform, transform_name
from .values import Path

logger = logging.getLogger(__name__)


class Schema:
    """Base class for all schema nodes.

    Fluent methods mutate the node and return it for chaining. Once a
    schema is handed to ``validate`` it is only read, so a finished schema
    may be shared between threads.
    """

    kind: str = "schema"

    def __init__(self) -> None:
        self.is_optional = False
        self.transforms: list[Transform] = []
        self.error_overrides: dict[str, str] = {}

    def optional(self) -> Schema:
        """Accept null (or an absent object field) without further checks."""
        self.is_optional = True
        return self

    def error_message(self, code: str, template: str) -> Schema:
        """Override the message template for errors this node produces.

        Args:
            code: Error code, e.g. ``string.too_short``
            template: Message template; ``{param}`` tokens are substituted

        Returns:
            Self for chaining
        """
        self.error_overrides[code] = template
        return self

    def transform(self, func: Callable[[Any], Any]) -> Schema:
        """Append a transform applied after all checks pass."""
        self.transforms.append(func)
        return self

    def trim(self) -> Schema:
        return self.transform(builtin_transforms.trim)

    def to_lowercase(self) -> Schema:
        return self.transform(builtin_transforms.to_lowercase)

    def to_uppercase(self) -> Schema:
        return self.transform(builtin_transforms.to_uppercase)

    def parse_number(self) -> Schema:
        return self.transform(builtin_transforms.parse_number)

    def to_integer(self) -> Schema:
        return self.transform(builtin_transforms.to_integer)

    def to_string(self) -> Schema:
        return self.transform(builtin_transforms.to_string)

    def make_error(
        self,
        code: str,
        path: Path,
        template: str | None = None,
        **params: Any,
    ) -> ErrorContext:
        """Build an error raised by this node.

        A template registered with ``error_message`` for ``code`` wins over
        ``template``, which wins over the code's default message.
        """
        message_template = self.error_overrides.get(code) or template or default_message(code)
        return ErrorContext(code=code, path=path, message_template=message_template, params=params)

    def validate(self, value: Any) -> ValidationResult:
        """Validate a value against this schema.

        Args:
            value: JSON-like value to validate

        Returns:
            ValidationResult holding the transformed value or the failure
        """
        return evaluate(self, value)

    def parse(self, value: Any) -> Any:
        """Validate a value and return the transformed output.

        Raises:
            SchemaValidationError: If validation fails
        """
        return self.validate(value).unwrap()

    def to_dict(self) -> dict[str, Any]:
        """Convert schema to its configuration representation.

        Custom predicates, custom transforms and scorers cannot be
        represented and are omitted.

        Returns:
            Dictionary accepted by ``SchemaFactory.create``
        """
        data: dict[str, Any] = {"type": self.kind}
        if self.is_optional:
            data["optional"] = True
        names = [transform_name(t) for t in self.transforms]
        if any(name is None for name in names):
            logger.debug("Omitting custom transforms from %s schema config", self.kind)
        if any(names):
            data["transforms"] = [name for name in names if name]
        if self.error_overrides:
            data["errors"] = dict(self.error_overrides)
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
