"""Examples of declaring and using schemas."""

from schemaknobs import (
    array,
    best_of,
    code_scorer,
    number,
    object,
    schema_factory,
    string,
)


def example_1_fluent_api():
    """Example using the fluent API."""
    user = (
        object({
            "id": number().integer().min(1),
            "name": string().trim().min_length(1),
            "email": string().email().to_lowercase(),
            "tags": array(string()).max_items(3),
        })
        .optional_field("nickname", string().max_length(10))
        .strict()
    )

    result = user.validate({
        "id": 7,
        "name": "  Ada ",
        "email": "ADA@EXAMPLE.COM",
        "tags": ["math"],
    })
    print("Valid:", result.valid, result.value)

    result = user.validate({"id": 0, "name": "x", "email": "x@y.io", "tags": []})
    print("Error:", result.error.code, result.error.path_string, result.error.message)


def example_2_custom_messages():
    """Example overriding error messages."""
    age = (
        number()
        .integer()
        .min(18)
        .error_message("number.min", "You must be at least {min} years old")
    )
    print(age.validate(16).error.message)


def example_3_best_of():
    """Example reporting the most relevant union error."""
    identifier = best_of(
        number().integer().min(1),
        string().uuid(),
        scorer=code_scorer({"string.pattern": 1, "number.min": 2}, default=10),
    )
    print(identifier.validate("not-a-uuid").error.to_dict())


def example_4_config_based():
    """Example building a schema from YAML."""
    schema = schema_factory.from_yaml(
        """
        type: object
        fields:
          username:
            type: string
            min_length: 3
            transforms: [trim, lowercase]
          port:
            type: number
            integer: true
            coerce: true
            max: 65535
        """
    )
    print(schema.validate({"username": " Admin ", "port": "8080"}).value)


if __name__ == "__main__":
    example_1_fluent_api()
    example_2_custom_messages()
    example_3_best_of()
    example_4_config_based()
