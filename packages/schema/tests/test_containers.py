"""Tests for array and object schemas."""

from dataclasses import dataclass

import pytest

from schemaknobs import (
    ObjectSchema,
    ParseError,
    SchemaDefinitionError,
    SchemaValidationError,
    array,
    boolean,
    number,
    object,
    string,
)


class TestArraySchema:
    """Test array validation and path construction."""

    def test_empty_array_valid_by_default(self):
        """Test min_items defaults to zero."""
        result = array(string()).validate([])
        assert result.valid
        assert result.value == []

    def test_first_failing_element_reported(self):
        """Test element errors keep their code and gain the index."""
        result = array(string().min_length(1)).validate(["a", "", ""])
        assert result.error.code == "string.too_short"
        assert result.error.path == (1,)

    def test_invalid_type(self):
        """Test non-arrays are rejected."""
        result = array(string()).validate({"a": 1})
        assert result.error.code == "array.invalid_type"
        assert result.error.params["actual_type"] == "object"

    def test_item_count_checked_before_elements(self):
        """Test length bounds are reported before element failures."""
        schema = array(number()).min_items(3)
        result = schema.validate(["x"])
        assert result.error.code == "array.min_items"
        assert result.error.params["min_items"] == 3
        assert result.error.path == ()
        assert result.error.message == "Must have at least 3 items"

    def test_max_items(self):
        """Test max_items."""
        result = array(number()).max_items(2).validate([1, 2, 3])
        assert result.error.code == "array.max_items"
        assert result.error.message == "Must have at most 2 items"

    def test_inverted_item_bounds_rejected(self):
        """Test contradictory bounds fail at construction."""
        with pytest.raises(SchemaDefinitionError):
            array(number()).min_items(5).max_items(1)

    def test_elements_transformed_into_new_list(self):
        """Test output is rebuilt and input untouched."""
        items = ["  A ", "b  "]
        result = array(string().trim().to_lowercase()).validate(items)
        assert result.value == ["a", "b"]
        assert items == ["  A ", "b  "]
        assert result.value is not items

    def test_tuple_accepted(self):
        """Test tuples count as arrays and produce lists."""
        assert array(number()).validate((1, 2)).value == [1, 2]

    def test_nested_paths(self):
        """Test indices and field names combine into the path."""
        schema = array(object({"tags": array(string().max_length(3))}))
        result = schema.validate([{"tags": ["ok"]}, {"tags": ["ok", "toolong"]}])
        assert result.error.code == "string.too_long"
        assert result.error.path == (1, "tags", 1)
        assert result.error.path_string == "[1].tags[1]"


class TestObjectSchema:
    """Test object validation semantics."""

    def test_concrete_scenario_min(self):
        """Test a failing nested number reports its own code and path."""
        schema = object({"id": number().integer().min(1)})
        result = schema.validate({"id": 0})
        assert result.error.code == "number.min"
        assert result.error.path == ("id",)

        result = schema.validate({"id": 1})
        assert result.valid
        assert result.value == {"id": 1}

    def test_missing_required_field(self):
        """Test absent required fields are reported by name."""
        schema = object({"name": string(), "age": number()})
        result = schema.validate({"name": "x"})
        assert result.error.code == "object.missing_field"
        assert result.error.params["field"] == "age"
        assert result.error.path == ("age",)
        assert result.error.message == "Field 'age' is required"

    def test_optional_field_may_be_absent(self):
        """Test optional_field skips absent fields in the output."""
        schema = object({"name": string()}).optional_field("email", string().email())
        result = schema.validate({"name": "x"})
        assert result.valid
        assert result.value == {"name": "x"}

    def test_optional_field_still_validated_when_present(self):
        """Test present optional fields are checked."""
        schema = object().optional_field("email", string().email())
        result = schema.validate({"email": "nope"})
        assert result.error.code == "string.pattern"
        assert result.error.path == ("email",)

    def test_optional_schema_allows_absence(self):
        """Test a field whose schema is optional may be absent."""
        schema = object({"nickname": string().optional()})
        assert schema.validate({}).value == {}
        assert schema.validate({"nickname": None}).value == {"nickname": None}

    def test_declaration_order_decides_first_error(self):
        """Test fields are checked in declaration order."""
        schema = object({"b": number(), "a": number()})
        result = schema.validate({"a": "x", "b": "y"})
        assert result.error.path == ("b",)

    def test_strict_unknown_key(self):
        """Test strict objects reject the first undeclared key."""
        schema = object().strict().field("name", string())
        result = schema.validate({"name": "x", "extra": 1, "more": 2})
        assert result.error.code == "object.unknown_key"
        assert result.error.params["key"] == "extra"
        assert result.error.path == ("extra",)

    def test_declared_field_errors_before_unknown_keys(self):
        """Test strict checking happens after declared fields."""
        schema = object().strict().field("name", string())
        result = schema.validate({"extra": 1, "name": 5})
        assert result.error.code == "string.invalid_type"

    def test_non_strict_drops_unknown_keys(self):
        """Test undeclared keys are not propagated to the output."""
        schema = object({"name": string()})
        result = schema.validate({"name": "x", "extra": 1})
        assert result.valid
        assert result.value == {"name": "x"}

    def test_output_in_declaration_order(self):
        """Test output key order follows declarations."""
        schema = object({"a": number(), "b": number()})
        result = schema.validate({"b": 2, "a": 1})
        assert list(result.value) == ["a", "b"]

    def test_input_not_mutated(self):
        """Test transforms produce a new object."""
        data = {"name": "  x  "}
        result = object({"name": string().trim()}).validate(data)
        assert result.value == {"name": "x"}
        assert data == {"name": "  x  "}

    def test_invalid_type(self):
        """Test non-objects are rejected."""
        result = object().validate([1])
        assert result.error.code == "object.invalid_type"
        assert result.error.message == "Expected object, got array"

    def test_override_not_inherited(self):
        """Test an object's override does not change child errors."""
        schema = (
            object({"name": string().min_length(2)})
            .error_message("string.too_short", "not used")
            .error_message("object.missing_field", "Please provide {field}")
        )
        assert schema.validate({"name": "x"}).error.message == "String must be at least 2 characters long"
        assert schema.validate({}).error.message == "Please provide name"

    def test_full_user(self, user_schema, valid_user):
        """Test a realistic nested schema end to end."""
        result = user_schema.validate(valid_user)
        assert result.valid
        assert result.value == {
            "id": 7,
            "name": "Ada",
            "email": "ada@example.com",
            "tags": ["math", "engines"],
        }

    def test_full_user_nested_failure(self, user_schema, valid_user):
        """Test a deep failure in the realistic schema."""
        valid_user["tags"] = ["ok", ""]
        result = user_schema.validate(valid_user)
        assert result.error.code == "string.too_short"
        assert result.error.path == ("tags", 1)

    def test_idempotent_revalidation(self, user_schema, valid_user):
        """Test validating the output again changes nothing."""
        first = user_schema.validate(valid_user).value
        second = user_schema.validate(first)
        assert second.valid
        assert second.value == first


@dataclass
class User:
    name: str
    active: bool


class Account:
    def __init__(self, owner):
        self.owner = owner

    @classmethod
    def from_dict(cls, data):
        return cls(data["owner"].upper())


class TestParse:
    """Test parse helpers."""

    def test_parse_returns_value(self):
        """Test parse returns the transformed value."""
        assert string().trim().parse("  a ") == "a"

    def test_parse_raises_on_failure(self):
        """Test parse raises SchemaValidationError."""
        with pytest.raises(SchemaValidationError) as exc_info:
            number().parse("x")
        assert exc_info.value.error.code == "number.invalid_type"

    def test_parse_as_dataclass(self):
        """Test building a dataclass from validated fields."""
        schema = object({"name": string(), "active": boolean()})
        user = schema.parse_as({"name": "ada", "active": True, "extra": 1}, User)
        assert user == User(name="ada", active=True)

    def test_parse_as_from_dict(self):
        """Test from_dict is preferred when available."""
        schema = object({"owner": string()})
        assert schema.parse_as({"owner": "ada"}, Account).owner == "ADA"

    def test_parse_as_incompatible_target(self):
        """Test construction errors become ParseError."""
        schema = ObjectSchema().field("name", string())
        with pytest.raises(ParseError):
            schema.parse_as({"name": "ada"}, User)
