"""
GraphQL Category Type

Defines the Category type, its filter/sort inputs, connection and mutation
inputs.
"""

from enum import Enum

import strawberry
from strawberry.types import Info

from dog_api.graphql.types.breed import BreedType, breed_to_graphql
from dog_api.graphql.types.pagination import PageInfoType, SortDirection, page_info_to_graphql
from dog_api.models import Category
from dog_api.services.pagination import Connection


@strawberry.type(name="Category")
class CategoryType:
    """
    GraphQL type representing a breed category (Herding, Toy, ...).

    Maps to the Category SQLAlchemy model. Breeds are resolved through
    the request's breeds-by-category loader.
    """

    id: strawberry.ID
    name: str
    description: str | None
    created_at: str
    updated_at: str

    @strawberry.field
    async def breeds(self, info: Info) -> list[BreedType] | None:
        breeds = await info.context.loaders.breeds_by_category_loader.load(str(self.id))
        return [breed_to_graphql(b) for b in breeds]


def category_to_graphql(category: Category) -> CategoryType:
    """Convert SQLAlchemy Category model to GraphQL CategoryType."""
    return CategoryType(
        id=strawberry.ID(category.id),
        name=category.name,
        description=category.description,
        created_at=category.created_at.isoformat(),
        updated_at=category.updated_at.isoformat(),
    )


@strawberry.input
class CategoryFilter:
    name: str | None = None
    name_contains: str | None = None
    description: str | None = None
    description_contains: str | None = None
    has_breeds: bool | None = None


@strawberry.enum
class CategorySortField(Enum):
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


@strawberry.input
class CategorySort:
    field: CategorySortField
    direction: SortDirection | None = None


@strawberry.type
class CategoryEdge:
    node: CategoryType
    cursor: str


@strawberry.type
class CategoryConnection:
    """Paginated list of categories."""

    edges: list[CategoryEdge]
    page_info: PageInfoType
    total_count: int


def category_connection_to_graphql(connection: Connection) -> CategoryConnection:
    return CategoryConnection(
        edges=[
            CategoryEdge(node=category_to_graphql(edge.node), cursor=edge.cursor)
            for edge in connection.edges
        ],
        page_info=page_info_to_graphql(connection.page_info),
        total_count=connection.total_count,
    )


@strawberry.input
class CreateCategoryInput:
    name: str
    description: str | None = None


@strawberry.input
class UpdateCategoryInput:
    """Input type for updating categories. Omitted fields are unchanged."""

    name: str | None = strawberry.UNSET
    description: str | None = strawberry.UNSET


@strawberry.type
class DeleteCategoryResponse:
    id: strawberry.ID
    success: bool
