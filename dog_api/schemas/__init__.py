"""
Pydantic Schemas Package

Validation schemas for mutation inputs:
- Create schemas: all required fields must be present and valid
- Update schemas: any subset of fields; only the fields sent are written
"""

from dog_api.schemas.breed import BreedCreate, BreedUpdate
from dog_api.schemas.category import CategoryCreate, CategoryUpdate

__all__ = [
    "BreedCreate",
    "BreedUpdate",
    "CategoryCreate",
    "CategoryUpdate",
]
