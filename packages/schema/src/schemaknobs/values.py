"""Helpers for the JSON-like value tree being validated.

Values are plain Python objects as produced by ``json.loads``:
``None``, ``bool``, ``int``/``float``, ``str``, ``list`` and ``dict``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Union

Value = Any
PathSegment = Union[str, int]
Path = tuple[PathSegment, ...]


def is_number(value: Any) -> bool:
    """Check for a finite JSON number (booleans are not numbers)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def type_name(value: Any) -> str:
    """Get the JSON type name of a value.

    Args:
        value: Value to inspect

    Returns:
        One of null, boolean, number, string, array, object or unknown
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    if is_object(value):
        return "object"
    return "unknown"


def format_path(path: Path) -> str:
    """Render a path as ``user.tags[1]``.

    Args:
        path: Sequence of field names and array indices

    Returns:
        Dotted path string, empty for the root
    """
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)
