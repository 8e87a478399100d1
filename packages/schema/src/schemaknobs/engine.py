"""Recursive evaluation of a schema tree against a value tree.

``evaluate`` dispatches on the schema kind, runs coercion, the type check
and the kind's constraints in their fixed order, recurses into children
with an extended path, and finally applies the node's transforms. The
first failure encountered is returned; nothing is raised for bad input.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TYPE_CHECKING

from .coercer import default_coercer
from .errors import ErrorCode, ErrorContext
from .exceptions import CoercionError, SchemaDefinitionError
from .result import ValidationResult
from .transforms import apply_transforms
from .values import Path, format_path, is_array, is_number, is_object, type_name

if TYPE_CHECKING:
    from .schema import Schema

logger = logging.getLogger(__name__)


def evaluate(schema: Schema, value: Any, path: Path = ()) -> ValidationResult:
    """Validate a value against a schema node.

    Args:
        schema: Schema node to evaluate
        value: JSON-like value
        path: Location of ``value`` within the root value

    Returns:
        ValidationResult with the transformed value or the selected failure
    """
    path = tuple(path)
    if value is None and schema.is_optional:
        return ValidationResult.success(None)

    handler = _HANDLERS.get(schema.kind)
    if handler is None:
        raise SchemaDefinitionError(
            f"Unsupported schema kind: {schema.kind}", context={"kind": schema.kind}
        )

    result = handler(schema, value, path)
    if result.valid and schema.transforms:
        return ValidationResult.success(apply_transforms(schema.transforms, result.value))
    return result


def _invalid_type(schema: Schema, value: Any, path: Path) -> ValidationResult:
    actual = type_name(value)
    if actual == "number" and not is_number(value):
        # NaN and infinities are not JSON numbers
        actual = "non-finite number"
    return ValidationResult.failure(
        schema.make_error(
            ErrorCode.invalid_type(schema.kind),
            path,
            expected_type=schema.kind,
            actual_type=actual,
        )
    )


def _check_constraints(schema: Any, value: Any, path: Path) -> ErrorContext | None:
    for constraint in schema.constraints():
        error = constraint.check(value, schema, path)
        if error is not None:
            return error
    return None


def _coerce(schema: Any, value: Any) -> Any:
    if not schema.coerce_enabled:
        return value
    try:
        return default_coercer.coerce(value, schema.kind)
    except CoercionError as e:
        logger.debug("Coercion to %s failed: %s", schema.kind, e)
        return value


def _evaluate_string(schema: Any, value: Any, path: Path) -> ValidationResult:
    if not isinstance(value, str):
        return _invalid_type(schema, value, path)
    error = _check_constraints(schema, value, path)
    if error is not None:
        return ValidationResult.failure(error)
    return ValidationResult.success(value)


def _evaluate_number(schema: Any, value: Any, path: Path) -> ValidationResult:
    original = value
    value = _coerce(schema, value)
    if not is_number(value):
        return _invalid_type(schema, original, path)
    error = _check_constraints(schema, value, path)
    if error is not None:
        return ValidationResult.failure(error)
    return ValidationResult.success(value)


def _evaluate_boolean(schema: Any, value: Any, path: Path) -> ValidationResult:
    original = value
    value = _coerce(schema, value)
    if not isinstance(value, bool):
        return _invalid_type(schema, original, path)
    error = _check_constraints(schema, value, path)
    if error is not None:
        return ValidationResult.failure(error)
    return ValidationResult.success(value)


def _evaluate_array(schema: Any, value: Any, path: Path) -> ValidationResult:
    if not is_array(value):
        return _invalid_type(schema, value, path)

    error = schema.item_count.check(value, schema, path)
    if error is not None:
        return ValidationResult.failure(error)

    items: list[Any] = []
    for index, item in enumerate(value):
        result = evaluate(schema.item_schema, item, path + (index,))
        if not result.valid:
            return result
        items.append(result.value)
    return ValidationResult.success(items)


def _evaluate_object(schema: Any, value: Any, path: Path) -> ValidationResult:
    if not is_object(value):
        return _invalid_type(schema, value, path)

    output: dict[str, Any] = {}
    for name, object_field in schema.fields.items():
        if name in value:
            result = evaluate(object_field.schema, value[name], path + (name,))
            if not result.valid:
                return result
            output[name] = result.value
        elif object_field.required and not object_field.schema.is_optional:
            return ValidationResult.failure(
                schema.make_error(ErrorCode.OBJECT_MISSING_FIELD, path + (name,), field=name)
            )

    if schema.is_strict:
        for key in value:
            if key not in schema.fields:
                return ValidationResult.failure(
                    schema.make_error(ErrorCode.OBJECT_UNKNOWN_KEY, path + (key,), key=key)
                )

    return ValidationResult.success(output)


def _no_match(schema: Any, path: Path) -> ValidationResult:
    return ValidationResult.failure(schema.make_error(ErrorCode.UNION_NO_MATCH, path))


def _evaluate_one_of(schema: Any, value: Any, path: Path) -> ValidationResult:
    last: ValidationResult | None = None
    for index, variant in enumerate(schema.variants):
        result = evaluate(variant, value, path)
        if result.valid:
            logger.debug("one_of variant %d accepted value at '%s'", index, format_path(path))
            return result
        last = result
    if last is None:
        return _no_match(schema, path)
    return last


def _evaluate_all_of(schema: Any, value: Any, path: Path) -> ValidationResult:
    result = ValidationResult.success(value)
    for index, variant in enumerate(schema.variants):
        result = evaluate(variant, value, path)
        if not result.valid:
            logger.debug("all_of variant %d rejected value at '%s'", index, format_path(path))
            return result
    return result


def _evaluate_best_of(schema: Any, value: Any, path: Path) -> ValidationResult:
    errors: list[ErrorContext] = []
    for index, variant in enumerate(schema.variants):
        result = evaluate(variant, value, path)
        if result.valid:
            logger.debug("best_of variant %d accepted value at '%s'", index, format_path(path))
            return result
        errors.append(result.error)  # type: ignore[arg-type]
    if not errors:
        return _no_match(schema, path)

    scores = [schema.scorer(error) for error in errors]
    best = min(range(len(errors)), key=lambda i: (scores[i], i))
    logger.debug(
        "best_of selected error %s (score %s) at '%s'",
        errors[best].code, scores[best], format_path(path),
    )
    return ValidationResult.failure(errors[best])


_UNION_MODES: dict[str, Callable[[Any, Any, Path], ValidationResult]] = {
    "one_of": _evaluate_one_of,
    "all_of": _evaluate_all_of,
    "best_of": _evaluate_best_of,
}


def _evaluate_union(schema: Any, value: Any, path: Path) -> ValidationResult:
    return _UNION_MODES[schema.mode.value](schema, value, path)


_HANDLERS: dict[str, Callable[[Any, Any, Path], ValidationResult]] = {
    "string": _evaluate_string,
    "number": _evaluate_number,
    "boolean": _evaluate_boolean,
    "array": _evaluate_array,
    "object": _evaluate_object,
    "union": _evaluate_union,
}
