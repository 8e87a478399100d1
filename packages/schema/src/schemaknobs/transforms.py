"""Value transforms applied after a schema's checks pass.

Each transform is a plain ``value -> value`` callable. Built-in transforms
leave values they do not apply to unchanged, so they can be chained on any
schema kind.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from .coercer import parse_number as _parse_number
from .exceptions import CoercionError, SchemaDefinitionError
from .values import is_number

Transform = Callable[[Any], Any]


def trim(value: Any) -> Any:
    """Strip surrounding whitespace from strings."""
    return value.strip() if isinstance(value, str) else value


def to_lowercase(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def to_uppercase(value: Any) -> Any:
    return value.upper() if isinstance(value, str) else value


def parse_number(value: Any) -> Any:
    """Parse numeric strings; other values pass through."""
    if isinstance(value, str):
        try:
            return _parse_number(value)
        except CoercionError:
            return value
    return value


def to_integer(value: Any) -> Any:
    """Floor numbers to integers."""
    if is_number(value):
        return int(math.floor(value))
    return value


def to_string(value: Any) -> Any:
    """Render scalars the way they appear in JSON."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


BUILTIN_TRANSFORMS: dict[str, Transform] = {
    "trim": trim,
    "lowercase": to_lowercase,
    "uppercase": to_uppercase,
    "parse_number": parse_number,
    "to_integer": to_integer,
    "to_string": to_string,
}


def get_transform(name: str) -> Transform:
    """Look up a built-in transform by name.

    Args:
        name: Transform name (trim, lowercase, uppercase, parse_number,
            to_integer, to_string)

    Returns:
        The transform callable

    Raises:
        SchemaDefinitionError: If the name is unknown
    """
    try:
        return BUILTIN_TRANSFORMS[name]
    except KeyError as e:
        raise SchemaDefinitionError(
            f"Unknown transform: {name}",
            context={"transform": name, "available": sorted(BUILTIN_TRANSFORMS)},
        ) from e


def transform_name(func: Transform) -> str | None:
    """Get the registered name of a built-in transform, if it is one."""
    for name, builtin in BUILTIN_TRANSFORMS.items():
        if builtin is func:
            return name
    return None


def apply_transforms(transforms: list[Transform], value: Any) -> Any:
    """Apply transforms left to right, each consuming the previous output."""
    for transform in transforms:
        value = transform(value)
    return value
