"""
GraphQL Types Package

This package contains all GraphQL type definitions that map to our
SQLAlchemy models. Types are defined using Strawberry's decorator syntax.

Types defined here:
- BreedType: Breed with its category
- CategoryType: Category with its breeds
- Filter, sort and pagination inputs
- Relay connection types (edges, pageInfo, totalCount)
- Input types and delete responses for mutations
"""

from dog_api.graphql.types.breed import (
    BreedConnection,
    BreedEdge,
    BreedFilter,
    BreedSort,
    BreedSortField,
    BreedType,
    CreateBreedInput,
    DeleteBreedResponse,
    UpdateBreedInput,
    breed_connection_to_graphql,
    breed_to_graphql,
)
from dog_api.graphql.types.category import (
    CategoryConnection,
    CategoryEdge,
    CategoryFilter,
    CategorySort,
    CategorySortField,
    CategoryType,
    CreateCategoryInput,
    DeleteCategoryResponse,
    UpdateCategoryInput,
    category_connection_to_graphql,
    category_to_graphql,
)
from dog_api.graphql.types.pagination import PageInfoType, PaginationInput, SortDirection

__all__ = [
    # Breed types
    "BreedType",
    "BreedEdge",
    "BreedConnection",
    "BreedFilter",
    "BreedSort",
    "BreedSortField",
    "CreateBreedInput",
    "UpdateBreedInput",
    "DeleteBreedResponse",
    "breed_to_graphql",
    "breed_connection_to_graphql",
    # Category types
    "CategoryType",
    "CategoryEdge",
    "CategoryConnection",
    "CategoryFilter",
    "CategorySort",
    "CategorySortField",
    "CreateCategoryInput",
    "UpdateCategoryInput",
    "DeleteCategoryResponse",
    "category_to_graphql",
    "category_connection_to_graphql",
    # Pagination types
    "PageInfoType",
    "PaginationInput",
    "SortDirection",
]
