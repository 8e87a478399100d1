"""Tests for ErrorContext, message rendering and results."""

import pytest

from schemaknobs import (
    ErrorCode,
    ErrorContext,
    SchemaValidationError,
    ValidationResult,
    render_template,
)
from schemaknobs.values import format_path, type_name


class TestRenderTemplate:
    """Test {param} substitution in message templates."""

    def test_substitutes_known_params(self):
        """Test tokens are replaced from params."""
        assert render_template("Between {min} and {max}", {"min": 5, "max": 10}) == "Between 5 and 10"

    def test_unresolved_tokens_left_verbatim(self):
        """Test tokens without a param stay in the output."""
        assert render_template("Need {min_length}, got {length}", {"length": 2}) == "Need {min_length}, got 2"

    def test_integral_floats_render_as_integers(self):
        """Test 0.0 renders as 0 and 1.5 stays 1.5."""
        assert render_template("{a}/{b}", {"a": 0.0, "b": 1.5}) == "0/1.5"


class TestErrorContext:
    """Test the structured failure record."""

    def test_default_template_from_code(self):
        """Test the template defaults to the code's message."""
        error = ErrorContext(ErrorCode.STRING_TOO_SHORT, ("name",), params={"min_length": 3})
        assert error.message_template == "String must be at least {min_length} characters long"
        assert error.message == "String must be at least 3 characters long"
        assert str(error) == error.message

    def test_unknown_code_gets_generic_message(self):
        """Test codes outside the taxonomy still render."""
        assert ErrorContext("custom.thing").message == "Validation error"

    def test_is_immutable(self):
        """Test fields and params cannot be changed after construction."""
        error = ErrorContext("number.min", ("age",), params={"min": 0})
        with pytest.raises(AttributeError):
            error.code = "number.max"
        with pytest.raises(TypeError):
            error.params["min"] = 5

    def test_is_hashable(self):
        """Test contexts can be used in sets and as dict keys."""
        first = ErrorContext("number.min", ("age",), params={"min": 0})
        second = ErrorContext("number.min", ("age",), params={"min": 0})
        assert hash(first) == hash(second)
        assert len({first, second}) == 1
        assert ErrorContext("number.min", ("age",), params={"min": 1}) not in {first}

    def test_params_are_copied(self):
        """Test later changes to the source dict do not leak in."""
        params = {"min": 0}
        error = ErrorContext("number.min", params=params)
        params["min"] = 99
        assert error.params["min"] == 0

    def test_path_prefix(self):
        """Test prefixing returns a new context with a longer path."""
        error = ErrorContext("string.pattern", ("email",))
        prefixed = error.with_path_prefix("users", 2)
        assert prefixed.path == ("users", 2, "email")
        assert error.path == ("email",)
        assert prefixed.path_string == "users[2].email"

    def test_with_template(self):
        """Test swapping the template keeps code and params."""
        error = ErrorContext("number.min", params={"min": 18})
        custom = error.with_template("Must be {min}+")
        assert custom.message == "Must be 18+"
        assert custom.code == "number.min"

    def test_to_dict(self):
        """Test JSON-ready conversion."""
        error = ErrorContext("object.unknown_key", ("extra",), params={"key": "extra"})
        assert error.to_dict() == {
            "code": "object.unknown_key",
            "path": ["extra"],
            "message": "Unknown key: extra",
            "message_template": "Unknown key: {key}",
            "params": {"key": "extra"},
        }


class TestValidationResult:
    """Test ValidationResult functionality."""

    def test_success_result(self):
        """Test creating a successful result."""
        result = ValidationResult.success(42)
        assert result.valid is True
        assert result.value == 42
        assert result.error is None
        assert bool(result) is True
        assert result.unwrap() == 42

    def test_failure_result(self):
        """Test creating a failed result."""
        error = ErrorContext("number.max", ("n",), params={"max": 1})
        result = ValidationResult.failure(error)
        assert result.valid is False
        assert result.error is error
        assert bool(result) is False

    def test_unwrap_failure_raises(self):
        """Test unwrap raises with the error attached."""
        error = ErrorContext("number.max", ("n",), params={"max": 1})
        with pytest.raises(SchemaValidationError) as exc_info:
            ValidationResult.failure(error).unwrap()
        assert exc_info.value.error is error
        assert exc_info.value.context == {"code": "number.max", "path": "n"}
        assert str(exc_info.value) == "Number must be less than or equal to 1"


class TestValueHelpers:
    """Test value tree helpers."""

    def test_type_names(self):
        """Test JSON type names for Python values."""
        assert type_name(None) == "null"
        assert type_name(True) == "boolean"
        assert type_name(3) == "number"
        assert type_name(2.5) == "number"
        assert type_name("x") == "string"
        assert type_name([]) == "array"
        assert type_name({}) == "object"
        assert type_name(object()) == "unknown"

    def test_format_path(self):
        """Test path rendering."""
        assert format_path(()) == ""
        assert format_path((0,)) == "[0]"
        assert format_path(("a", "b", 3, "c")) == "a.b[3].c"
