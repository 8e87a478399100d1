"""Pytest configuration for schemaknobs tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from schemaknobs import array, number, object, string  # noqa: E402


@pytest.fixture
def user_schema():
    """Object schema exercising nested containers and transforms."""
    return (
        object({
            "id": number().integer().min(1),
            "name": string().min_length(1).trim(),
            "email": string().email().to_lowercase(),
            "tags": array(string().min_length(1)).max_items(3),
        })
        .optional_field("nickname", string().max_length(10))
        .strict()
    )


@pytest.fixture
def valid_user():
    return {
        "id": 7,
        "name": "  Ada  ",
        "email": "ADA@EXAMPLE.COM",
        "tags": ["math", "engines"],
    }
