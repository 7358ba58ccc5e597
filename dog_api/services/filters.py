"""
Filter Builder

Turns GraphQL filter and sort inputs into the predicate and order-by dicts
understood by the repositories.

Only the fields a client actually supplied end up in the predicate:

    build_breed_where(BreedFilter(min_average_height=20, max_average_height=30))
    -> {"average_height": {"gte": 20, "lte": 30}}

    build_breed_where(None)
    -> {}

A field counts as supplied when it is not None. Zero is a valid bound and
is kept. Empty ``category_ids`` or ``colors`` lists are ignored.
"""

from typing import Any

# Breed columns that accept min_<field> / max_<field> bounds
BREED_RANGE_FIELDS = (
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
)

# Breed text columns that accept <field>_contains
BREED_TEXT_FIELDS = ("description", "history", "origin")

DEFAULT_SORT_FIELD = "name"
DEFAULT_SORT_DIRECTION = "asc"


def contains(value: str) -> dict[str, str]:
    """Case-insensitive substring match."""
    return {"contains": value, "mode": "insensitive"}


def build_breed_where(filter: Any = None) -> dict[str, Any]:
    """
    Build the breed predicate from a BreedFilter.

    ``name_contains`` replaces an exact ``name`` match and a non-empty
    ``category_ids`` replaces ``category_id`` when both are given.
    """
    where: dict[str, Any] = {}
    if filter is None:
        return where

    if filter.name is not None:
        where["name"] = filter.name
    if filter.name_contains is not None:
        where["name"] = contains(filter.name_contains)

    for field in BREED_TEXT_FIELDS:
        value = getattr(filter, f"{field}_contains")
        if value is not None:
            where[field] = contains(value)

    if filter.category_id is not None:
        where["category_id"] = filter.category_id
    if filter.category_ids:
        where["category_id"] = {"in": list(filter.category_ids)}

    if filter.colors:
        where["colors"] = {"has_some": list(filter.colors)}

    for field in BREED_RANGE_FIELDS:
        bounds = {}
        low = getattr(filter, f"min_{field}")
        high = getattr(filter, f"max_{field}")
        if low is not None:
            bounds["gte"] = low
        if high is not None:
            bounds["lte"] = high
        if bounds:
            where[field] = bounds

    return where


def build_category_where(filter: Any = None) -> dict[str, Any]:
    """Build the category predicate from a CategoryFilter."""
    where: dict[str, Any] = {}
    if filter is None:
        return where

    if filter.name is not None:
        where["name"] = filter.name
    if filter.name_contains is not None:
        where["name"] = contains(filter.name_contains)

    if filter.description is not None:
        where["description"] = filter.description
    if filter.description_contains is not None:
        where["description"] = contains(filter.description_contains)

    if filter.has_breeds is not None:
        where["breeds"] = {"some": {}} if filter.has_breeds else {"none": {}}

    return where


def build_order_by(sort: Any = None, default_field: str = DEFAULT_SORT_FIELD) -> dict[str, str]:
    """
    Build the order-by dict from a sort input.

    Enum members are reduced to their values, so ``BreedSortField.AVERAGE_HEIGHT``
    with no direction gives ``{"average_height": "asc"}``.
    """
    if sort is None:
        return {default_field: DEFAULT_SORT_DIRECTION}

    field = getattr(sort.field, "value", sort.field)
    direction = sort.direction
    if direction is None:
        return {field: DEFAULT_SORT_DIRECTION}
    return {field: getattr(direction, "value", direction)}
