"""
Category Service

Read and write operations for categories.
"""

from typing import Any

from dog_api.schemas.category import CategoryCreate, CategoryUpdate
from dog_api.services.filters import build_category_where, build_order_by
from dog_api.services.pagination import Connection, paginate
from dog_api.utils import validate_input


def list_categories(store: Any, filter: Any = None, sort: Any = None, pagination: Any = None) -> Connection:
    """List categories as a cursor-paginated connection, name ascending by default."""
    return paginate(
        store,
        where=build_category_where(filter),
        order_by=build_order_by(sort),
        pagination=pagination,
    )


def get_category(store: Any, id: str):
    return store.find_unique(id)


def create_category(store: Any, data: dict[str, Any]):
    return store.create(validate_input(CategoryCreate, data))


def update_category(store: Any, id: str, data: dict[str, Any]):
    return store.update(id, validate_input(CategoryUpdate, data, partial=True))


def delete_category(store: Any, id: str) -> dict[str, Any]:
    """
    Delete a category.

    Raises:
        NotFoundError: If the category does not exist
        ForeignKeyError: If breeds still belong to it
    """
    store.delete(id)
    return {"id": id, "success": True}
