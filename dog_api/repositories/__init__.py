"""
Repositories Package

Stores that translate declarative predicates, orderings and cursor seeks
into SQLAlchemy queries. One repository per model, bound to the session
of the current request.
"""

from dog_api.repositories.base import Repository, compile_where
from dog_api.repositories.breeds import BreedRepository
from dog_api.repositories.categories import CategoryRepository

__all__ = [
    "Repository",
    "compile_where",
    "BreedRepository",
    "CategoryRepository",
]
