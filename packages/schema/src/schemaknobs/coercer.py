"""Type coercion applied before type checking.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from .exceptions import CoercionError
from .values import is_number, type_name


# JSON number grammar, optionally signed with a leading '+'
NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

TRUE_STRINGS = frozenset(("true", "1", "yes", "y", "on"))
FALSE_STRINGS = frozenset(("false", "0", "no", "n", "off"))


def parse_number(text: str) -> int | float:
    """Parse a string as a JSON-style number.

    Args:
        text: String to parse; surrounding whitespace is ignored

    Returns:
        int for integer literals, float otherwise

    Raises:
        CoercionError: If the string is not a finite number
    """
    text = text.strip()
    if not NUMBER_PATTERN.match(text):
        raise CoercionError(f"String '{text}' is not a valid number", context={"value": text})
    try:
        if INTEGER_PATTERN.match(text):
            return int(text)
        number = float(text)
    except ValueError as e:
        # int() refuses literals beyond the interpreter's digit limit
        raise CoercionError(
            f"String '{text[:32]}...' is too long to convert",
            context={"length": len(text)},
        ) from e
    if not is_number(number):
        raise CoercionError(f"String '{text}' is out of range", context={"value": text})
    return number


class Coercer:
    """Converts values between JSON types on request.

    Only string sources are converted; values already of the target type
    are returned unchanged and anything else raises ``CoercionError``.
    """

    def __init__(self) -> None:
        self._coercion_map: dict[str, Callable[[Any], Any]] = {
            "number": self._to_number,
            "boolean": self._to_boolean,
        }

    def coerce(self, value: Any, target: str) -> Any:
        """Coerce a value to the target JSON type.

        Args:
            value: Value to coerce
            target: Target type name (number or boolean)

        Returns:
            Coerced value

        Raises:
            CoercionError: If coercion fails
        """
        coercion_func = self._coercion_map.get(target)
        if coercion_func is None:
            raise CoercionError(f"No coercion available to {target}", context={"target": target})
        return coercion_func(value)

    def _to_number(self, value: Any) -> int | float:
        if is_number(value):
            return value
        if isinstance(value, str):
            return parse_number(value)
        raise CoercionError(
            f"Cannot coerce {type_name(value)} to number",
            context={"actual_type": type_name(value)},
        )

    def _to_boolean(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
            raise CoercionError(f"String '{value}' is not a valid boolean", context={"value": value})
        raise CoercionError(
            f"Cannot coerce {type_name(value)} to boolean",
            context={"actual_type": type_name(value)},
        )


default_coercer = Coercer()
