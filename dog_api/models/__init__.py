"""
SQLAlchemy Models Package

Model Relationships:
- Category <-> Breed: One-to-Many (a category owns many breeds,
                      each breed belongs to exactly one category)

Import all models here so Alembic discovers them for migrations.
"""

# The order matters for SQLAlchemy to resolve relationships
from dog_api.models.category import Category
from dog_api.models.breed import Breed

__all__ = [
    "Category",
    "Breed",
]
