"""
Tests for the Breed and Category Services

Services are exercised against a MagicMock store to check what reaches
the repository.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from dog_api.errors import NotFoundError, ValidationError
from dog_api.graphql.types.breed import BreedFilter
from dog_api.graphql.types.category import CategoryFilter
from dog_api.graphql.types.pagination import PaginationInput
from dog_api.services import breeds as breed_service
from dog_api.services import categories as category_service
from tests.conftest import breed_data


@pytest.fixture
def store():
    store = MagicMock()
    store.count.return_value = 0
    store.find_many.return_value = []
    return store


class TestListCategories:
    """Tests for list_categories."""

    def test_no_arguments(self, store):
        category_service.list_categories(store)

        store.find_many.assert_called_once_with(
            where={}, order_by={"name": "asc"}, cursor=None, skip=None, take=10
        )

    def test_has_breeds_filter(self, store):
        category_service.list_categories(store, filter=CategoryFilter(has_breeds=True))

        assert store.find_many.call_args.kwargs["where"] == {"breeds": {"some": {}}}


class TestListBreeds:
    """Tests for list_breeds."""

    def test_category_ids_filter(self, store):
        breed_service.list_breeds(store, filter=BreedFilter(category_ids=["a", "b"]))

        store.count.assert_called_once_with(where={"category_id": {"in": ["a", "b"]}})
        assert store.find_many.call_args.kwargs["where"] == {"category_id": {"in": ["a", "b"]}}

    def test_pagination_passed_through(self, store):
        breed_service.list_breeds(store, pagination=PaginationInput(first=3))

        assert store.find_many.call_args.kwargs["take"] == 3


class TestGetBreed:
    def test_returns_store_row(self, store):
        store.find_unique.return_value = "row"

        assert breed_service.get_breed(store, "abc") == "row"
        store.find_unique.assert_called_once_with("abc")

    def test_missing_is_none(self, store):
        store.find_unique.return_value = None

        assert breed_service.get_breed(store, "abc") is None


class TestCreateBreed:
    """Tests for create_breed validation."""

    def test_valid_input_reaches_store(self, store):
        category_id = str(uuid.uuid4())

        breed_service.create_breed(store, breed_data(category_id=category_id))

        data = store.create.call_args.args[0]
        assert data["name"] == "Border Collie"
        assert data["category_id"] == category_id

    def test_missing_lists_default_to_empty(self, store):
        data = breed_data(category_id=str(uuid.uuid4()), colors=None)
        del data["common_names"]

        breed_service.create_breed(store, data)

        created = store.create.call_args.args[0]
        assert created["colors"] == []
        assert created["common_names"] == []

    @pytest.mark.parametrize("overrides", [
        {"affection": 6},
        {"affection": 0},
        {"name": "A"},
        {"description": "short"},
        {"origin": "X"},
        {"average_height": -1},
        {"category_id": "not-a-uuid"},
    ])
    def test_invalid_input_rejected(self, store, overrides):
        data = breed_data(category_id=str(uuid.uuid4()))
        data.update(overrides)

        with pytest.raises(ValidationError):
            breed_service.create_breed(store, data)

        store.create.assert_not_called()


class TestUpdateBreed:
    """Tests for update_breed partial updates."""

    def test_only_provided_fields(self, store):
        breed_service.update_breed(store, "abc", {"affection": 3})

        store.update.assert_called_once_with("abc", {"affection": 3})

    def test_explicit_null_clears_nullable_field(self, store):
        breed_service.update_breed(store, "abc", {"fun_fact": None})

        store.update.assert_called_once_with("abc", {"fun_fact": None})

    def test_null_required_field_rejected(self, store):
        with pytest.raises(ValidationError, match="name cannot be null"):
            breed_service.update_breed(store, "abc", {"name": None})

    def test_empty_update_rejected(self, store):
        with pytest.raises(ValidationError):
            breed_service.update_breed(store, "abc", {})

    def test_not_found_propagates(self, store):
        store.update.side_effect = NotFoundError("Breed", "abc")

        with pytest.raises(NotFoundError):
            breed_service.update_breed(store, "abc", {"affection": 3})


class TestDeletes:
    def test_delete_breed(self, store):
        assert breed_service.delete_breed(store, "abc") == {"id": "abc", "success": True}
        store.delete.assert_called_once_with("abc")

    def test_delete_category_error_propagates(self, store):
        store.delete.side_effect = NotFoundError("Category", "abc")

        with pytest.raises(NotFoundError):
            category_service.delete_category(store, "abc")


class TestCategoryWrites:
    def test_create_strips_name(self, store):
        category_service.create_category(store, {"name": "  Hound  ", "description": None})

        store.create.assert_called_once_with({"name": "Hound", "description": None})

    def test_blank_name_rejected(self, store):
        with pytest.raises(ValidationError):
            category_service.create_category(store, {"name": "   "})

    def test_update_description_only(self, store):
        category_service.update_category(store, "abc", {"description": "New text"})

        store.update.assert_called_once_with("abc", {"description": "New text"})
