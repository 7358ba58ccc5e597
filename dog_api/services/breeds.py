"""
Breed Service

Read and write operations for breeds, independent of GraphQL. The store is
a BreedRepository (or anything with the same methods).
"""

from typing import Any

from dog_api.schemas.breed import BreedCreate, BreedUpdate
from dog_api.services.filters import build_breed_where, build_order_by
from dog_api.services.pagination import Connection, paginate
from dog_api.utils import validate_input


def list_breeds(store: Any, filter: Any = None, sort: Any = None, pagination: Any = None) -> Connection:
    """
    List breeds as a cursor-paginated connection.

    Args:
        store: Breed repository
        filter: BreedFilter or None
        sort: BreedSort or None (name ascending)
        pagination: PaginationInput or None (first 10)
    """
    return paginate(
        store,
        where=build_breed_where(filter),
        order_by=build_order_by(sort),
        pagination=pagination,
    )


def get_breed(store: Any, id: str):
    """Fetch one breed, or None when it does not exist."""
    return store.find_unique(id)


def create_breed(store: Any, data: dict[str, Any]):
    """
    Validate and insert a breed.

    Raises:
        ValidationError: If the input breaks a field rule
        ConflictError: If the name is taken
        ForeignKeyError: If the category does not exist
    """
    return store.create(validate_input(BreedCreate, data))


def update_breed(store: Any, id: str, data: dict[str, Any]):
    """
    Apply a partial update. ``data`` holds only the fields the client sent.

    Raises:
        ValidationError: If no field is sent or a field breaks a rule
        NotFoundError: If the breed does not exist
    """
    return store.update(id, validate_input(BreedUpdate, data, partial=True))


def delete_breed(store: Any, id: str) -> dict[str, Any]:
    store.delete(id)
    return {"id": id, "success": True}
