"""
Tests for the Filter Builder

Filter and sort inputs are plain Strawberry input objects, so they are
built directly here without going through GraphQL.
"""

from dog_api.graphql.types.breed import BreedFilter, BreedSort, BreedSortField
from dog_api.graphql.types.category import CategoryFilter, CategorySort, CategorySortField
from dog_api.graphql.types.pagination import SortDirection
from dog_api.services.filters import (
    build_breed_where,
    build_category_where,
    build_order_by,
)


class TestBuildBreedWhere:
    """Tests for build_breed_where."""

    def test_no_filter(self):
        assert build_breed_where(None) == {}

    def test_empty_filter(self):
        assert build_breed_where(BreedFilter()) == {}

    def test_height_range(self):
        where = build_breed_where(BreedFilter(min_average_height=20, max_average_height=30))

        assert where == {"average_height": {"gte": 20, "lte": 30}}

    def test_single_bound(self):
        assert build_breed_where(BreedFilter(max_affection=3)) == {"affection": {"lte": 3}}
        assert build_breed_where(BreedFilter(min_playfulness=4)) == {"playfulness": {"gte": 4}}

    def test_zero_bound_is_kept(self):
        """A zero threshold is a real bound, not a missing one."""
        where = build_breed_where(BreedFilter(min_average_weight=0))

        assert where == {"average_weight": {"gte": 0}}

    def test_every_range_field(self):
        filter = BreedFilter(
            min_average_height=1,
            min_average_weight=1,
            min_average_life_expectancy=1,
            min_exercise_required=1,
            min_ease_of_training=1,
            min_affection=1,
            min_playfulness=1,
            min_good_with_children=1,
            min_good_with_dogs=1,
            min_grooming_required=1,
        )

        assert set(build_breed_where(filter)) == {
            "average_height",
            "average_weight",
            "average_life_expectancy",
            "exercise_required",
            "ease_of_training",
            "affection",
            "playfulness",
            "good_with_children",
            "good_with_dogs",
            "grooming_required",
        }

    def test_category_ids(self):
        where = build_breed_where(BreedFilter(category_ids=["a", "b"]))

        assert where == {"category_id": {"in": ["a", "b"]}}

    def test_category_ids_override_category_id(self):
        where = build_breed_where(BreedFilter(category_id="x", category_ids=["a"]))

        assert where == {"category_id": {"in": ["a"]}}

    def test_empty_category_ids_ignored(self):
        assert build_breed_where(BreedFilter(category_id="x", category_ids=[])) == {
            "category_id": "x"
        }

    def test_name_exact_and_contains(self):
        assert build_breed_where(BreedFilter(name="Pug")) == {"name": "Pug"}
        assert build_breed_where(BreedFilter(name="Pug", name_contains="pu")) == {
            "name": {"contains": "pu", "mode": "insensitive"}
        }

    def test_text_contains(self):
        where = build_breed_where(
            BreedFilter(
                description_contains="loyal",
                history_contains="roman",
                origin_contains="germ",
            )
        )

        assert where == {
            "description": {"contains": "loyal", "mode": "insensitive"},
            "history": {"contains": "roman", "mode": "insensitive"},
            "origin": {"contains": "germ", "mode": "insensitive"},
        }

    def test_colors(self):
        assert build_breed_where(BreedFilter(colors=["Black", "Tan"])) == {
            "colors": {"has_some": ["Black", "Tan"]}
        }
        assert build_breed_where(BreedFilter(colors=[])) == {}

    def test_only_supplied_keys(self):
        where = build_breed_where(
            BreedFilter(name_contains="collie", min_exercise_required=3, colors=["Black"])
        )

        assert set(where) == {"name", "exercise_required", "colors"}


class TestBuildCategoryWhere:
    """Tests for build_category_where."""

    def test_no_filter(self):
        assert build_category_where(None) == {}
        assert build_category_where(CategoryFilter()) == {}

    def test_has_breeds_true(self):
        assert build_category_where(CategoryFilter(has_breeds=True)) == {
            "breeds": {"some": {}}
        }

    def test_has_breeds_false(self):
        assert build_category_where(CategoryFilter(has_breeds=False)) == {
            "breeds": {"none": {}}
        }

    def test_text_fields(self):
        assert build_category_where(CategoryFilter(name="Toy", description="Small")) == {
            "name": "Toy",
            "description": "Small",
        }
        assert build_category_where(CategoryFilter(description_contains="dogs")) == {
            "description": {"contains": "dogs", "mode": "insensitive"}
        }


class TestBuildOrderBy:
    """Tests for build_order_by."""

    def test_default_is_name_ascending(self):
        assert build_order_by(None) == {"name": "asc"}

    def test_direction_defaults_to_ascending(self):
        sort = BreedSort(field=BreedSortField.AVERAGE_HEIGHT)

        assert build_order_by(sort) == {"average_height": "asc"}

    def test_explicit_direction(self):
        sort = CategorySort(field=CategorySortField.CREATED_AT, direction=SortDirection.DESC)

        assert build_order_by(sort) == {"created_at": "desc"}
