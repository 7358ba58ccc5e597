"""
Tests for Input Validation

Covers the Pydantic schemas through validate_input, which is how the
services and the seed script use them.
"""

import uuid

import pytest

from dog_api.errors import ValidationError
from dog_api.schemas.breed import BreedCreate, BreedUpdate
from dog_api.schemas.category import CategoryCreate, CategoryUpdate
from dog_api.utils import validate_input
from tests.conftest import breed_data

CATEGORY_ID = str(uuid.uuid4())


class TestBreedCreate:
    def test_valid_breed(self):
        values = validate_input(BreedCreate, breed_data(category_id=CATEGORY_ID))

        assert values["name"] == "Border Collie"
        assert values["category_id"] == CATEGORY_ID

    def test_null_lists_become_empty(self):
        values = validate_input(
            BreedCreate, breed_data(category_id=CATEGORY_ID, colors=None, common_names=None)
        )

        assert values["colors"] == []
        assert values["common_names"] == []

    @pytest.mark.parametrize("field, value", [
        ("name", "A"),
        ("description", "Too short"),
        ("origin", "X"),
        ("average_height", 0),
        ("affection", 6),
        ("grooming_required", 0),
        ("category_id", "not-a-uuid"),
    ])
    def test_invalid_field(self, field, value):
        data = breed_data(category_id=CATEGORY_ID)
        data[field] = value

        with pytest.raises(ValidationError) as exc_info:
            validate_input(BreedCreate, data)

        assert field in exc_info.value.message

    def test_every_problem_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_input(BreedCreate, breed_data(category_id=CATEGORY_ID, name="A", affection=9))

        assert "name" in exc_info.value.message
        assert "affection" in exc_info.value.message


class TestBreedUpdate:
    def test_only_sent_fields_returned(self):
        values = validate_input(BreedUpdate, {"origin": "Wales"}, partial=True)

        assert values == {"origin": "Wales"}

    def test_nullable_fields_can_be_cleared(self):
        values = validate_input(BreedUpdate, {"fun_fact": None, "common_names": None}, partial=True)

        assert values == {"fun_fact": None, "common_names": None}

    def test_required_column_cannot_be_null(self):
        with pytest.raises(ValidationError, match="name cannot be null"):
            validate_input(BreedUpdate, {"name": None}, partial=True)

    def test_empty_update_rejected(self):
        with pytest.raises(ValidationError, match="At least one field"):
            validate_input(BreedUpdate, {}, partial=True)


class TestCategorySchemas:
    def test_name_stripped(self):
        values = validate_input(CategoryCreate, {"name": "  Herding  "})

        assert values == {"name": "Herding", "description": None}

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="empty or whitespace"):
            validate_input(CategoryCreate, {"name": "   "})

    def test_long_description_rejected(self):
        with pytest.raises(ValidationError, match="description"):
            validate_input(CategoryCreate, {"name": "Toy", "description": "x" * 1001})

    def test_update_name_cannot_be_null(self):
        with pytest.raises(ValidationError, match="name cannot be null"):
            validate_input(CategoryUpdate, {"name": None}, partial=True)

    def test_update_description_can_be_cleared(self):
        assert validate_input(CategoryUpdate, {"description": None}, partial=True) == {"description": None}
