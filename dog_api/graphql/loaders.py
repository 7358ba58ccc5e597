"""
GraphQL DataLoaders

Request-scoped batch loaders. Every ``.load(key)`` issued while one
resolution step runs is collected into a single repository query, and the
results are handed back in the order the keys were requested.

A new ``Loaders`` instance is created for every GraphQL request (see
``get_context``), so cached rows never leak between requests.
"""

import logging
from collections import defaultdict
from functools import partial

from strawberry.dataloader import DataLoader

from dog_api.models import Breed, Category
from dog_api.repositories import BreedRepository, CategoryRepository

logger = logging.getLogger(__name__)


async def load_categories(store: CategoryRepository, keys: list[str]) -> list[Category | None]:
    """Batch load categories by ID. Unknown IDs yield None."""
    logger.debug(f"Batch loading {len(keys)} categories")
    categories = store.find_many(where={"id": {"in": list(keys)}})
    categories_map = {category.id: category for category in categories}
    return [categories_map.get(key) for key in keys]


async def load_breeds(store: BreedRepository, keys: list[str]) -> list[Breed | None]:
    """Batch load breeds by ID. Unknown IDs yield None."""
    logger.debug(f"Batch loading {len(keys)} breeds")
    breeds = store.find_many(where={"id": {"in": list(keys)}})
    breeds_map = {breed.id: breed for breed in breeds}
    return [breeds_map.get(key) for key in keys]


async def load_breeds_by_category(store: BreedRepository, keys: list[str]) -> list[list[Breed]]:
    """Batch load the breeds of each category. Categories without breeds yield []."""
    logger.debug(f"Batch loading breeds for {len(keys)} categories")
    breeds = store.find_many(
        where={"category_id": {"in": list(keys)}},
        order_by={"name": "asc"},
    )
    breeds_by_category = defaultdict(list)
    for breed in breeds:
        breeds_by_category[breed.category_id].append(breed)
    return [breeds_by_category.get(key, []) for key in keys]


class Loaders:
    def __init__(self, breeds: BreedRepository, categories: CategoryRepository):
        self.category_loader = DataLoader(load_fn=partial(load_categories, categories))
        self.breed_loader = DataLoader(load_fn=partial(load_breeds, breeds))
        self.breeds_by_category_loader = DataLoader(
            load_fn=partial(load_breeds_by_category, breeds)
        )
