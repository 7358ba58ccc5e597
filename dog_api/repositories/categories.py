"""Category store."""

from dog_api.models import Category
from dog_api.repositories.base import Repository


class CategoryRepository(Repository[Category]):
    model = Category
    resource = "Category"
