"""
GraphQL Breed Type

Defines the Breed type, its filter/sort inputs, connection and mutation
inputs.
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from dog_api.graphql.types.pagination import PageInfoType, SortDirection, page_info_to_graphql
from dog_api.models import Breed
from dog_api.services.pagination import Connection

if TYPE_CHECKING:
    from dog_api.graphql.types.category import CategoryType


@strawberry.type(name="Breed")
class BreedType:
    """
    GraphQL type representing a dog breed.

    Maps to the Breed SQLAlchemy model. The category is resolved through
    the request's category loader.
    """

    id: strawberry.ID
    name: str
    common_names: list[str] | None
    description: str
    history: str
    fun_fact: str | None
    health: str
    origin: str
    colors: list[str]
    average_height: float
    average_weight: float
    average_life_expectancy: float
    exercise_required: int
    ease_of_training: int
    affection: int
    playfulness: int
    good_with_children: int
    good_with_dogs: int
    grooming_required: int
    created_at: str
    updated_at: str
    category_id: strawberry.Private[str]

    @strawberry.field
    async def category(
        self, info: Info
    ) -> Annotated["CategoryType", strawberry.lazy("dog_api.graphql.types.category")]:
        from dog_api.graphql.types.category import category_to_graphql

        category = await info.context.loaders.category_loader.load(self.category_id)
        return category_to_graphql(category)


def breed_to_graphql(breed: Breed) -> BreedType:
    """Convert SQLAlchemy Breed model to GraphQL BreedType."""
    return BreedType(
        id=strawberry.ID(breed.id),
        name=breed.name,
        common_names=breed.common_names,
        description=breed.description,
        history=breed.history,
        fun_fact=breed.fun_fact,
        health=breed.health,
        origin=breed.origin,
        colors=breed.colors or [],
        average_height=breed.average_height,
        average_weight=breed.average_weight,
        average_life_expectancy=breed.average_life_expectancy,
        exercise_required=breed.exercise_required,
        ease_of_training=breed.ease_of_training,
        affection=breed.affection,
        playfulness=breed.playfulness,
        good_with_children=breed.good_with_children,
        good_with_dogs=breed.good_with_dogs,
        grooming_required=breed.grooming_required,
        created_at=breed.created_at.isoformat(),
        updated_at=breed.updated_at.isoformat(),
        category_id=breed.category_id,
    )


# =============================================================================
# Filtering and Sorting
# =============================================================================


@strawberry.input
class BreedFilter:
    """
    Breed filter. Every field is optional and the supplied ones are ANDed.

    ``*Contains`` fields match case-insensitively; ``min*``/``max*`` are
    inclusive bounds.
    """

    name: str | None = None
    name_contains: str | None = None
    description_contains: str | None = None
    history_contains: str | None = None
    origin_contains: str | None = None
    category_id: strawberry.ID | None = None
    category_ids: list[strawberry.ID] | None = None
    colors: list[str] | None = None
    min_average_height: float | None = None
    max_average_height: float | None = None
    min_average_weight: float | None = None
    max_average_weight: float | None = None
    min_average_life_expectancy: float | None = None
    max_average_life_expectancy: float | None = None
    min_exercise_required: int | None = None
    max_exercise_required: int | None = None
    min_ease_of_training: int | None = None
    max_ease_of_training: int | None = None
    min_affection: int | None = None
    max_affection: int | None = None
    min_playfulness: int | None = None
    max_playfulness: int | None = None
    min_good_with_children: int | None = None
    max_good_with_children: int | None = None
    min_good_with_dogs: int | None = None
    max_good_with_dogs: int | None = None
    min_grooming_required: int | None = None
    max_grooming_required: int | None = None


@strawberry.enum
class BreedSortField(Enum):
    NAME = "name"
    AVERAGE_HEIGHT = "average_height"
    AVERAGE_WEIGHT = "average_weight"
    AVERAGE_LIFE_EXPECTANCY = "average_life_expectancy"
    EXERCISE_REQUIRED = "exercise_required"
    EASE_OF_TRAINING = "ease_of_training"
    AFFECTION = "affection"
    PLAYFULNESS = "playfulness"
    GOOD_WITH_CHILDREN = "good_with_children"
    GOOD_WITH_DOGS = "good_with_dogs"
    GROOMING_REQUIRED = "grooming_required"
    CATEGORY_ID = "category_id"


@strawberry.input
class BreedSort:
    field: BreedSortField
    direction: SortDirection | None = None


# =============================================================================
# Connection
# =============================================================================


@strawberry.type
class BreedEdge:
    node: BreedType
    cursor: str


@strawberry.type
class BreedConnection:
    """
    Paginated list of breeds.

    Follows the Relay Connection pattern; ``totalCount`` ignores paging.
    """

    edges: list[BreedEdge]
    page_info: PageInfoType
    total_count: int


def breed_connection_to_graphql(connection: Connection) -> BreedConnection:
    return BreedConnection(
        edges=[
            BreedEdge(node=breed_to_graphql(edge.node), cursor=edge.cursor)
            for edge in connection.edges
        ],
        page_info=page_info_to_graphql(connection.page_info),
        total_count=connection.total_count,
    )


# =============================================================================
# Mutation Inputs
# =============================================================================


@strawberry.input
class CreateBreedInput:
    """Input type for creating breeds."""

    name: str
    description: str
    history: str
    health: str
    origin: str
    average_height: float
    average_weight: float
    average_life_expectancy: float
    exercise_required: int
    ease_of_training: int
    affection: int
    playfulness: int
    good_with_children: int
    good_with_dogs: int
    grooming_required: int
    category_id: strawberry.ID
    common_names: list[str] | None = None
    fun_fact: str | None = None
    colors: list[str] | None = None


@strawberry.input
class UpdateBreedInput:
    """
    Input type for updating breeds.

    Fields left out of the request are unchanged. Only commonNames and
    funFact accept an explicit null.
    """

    name: str | None = strawberry.UNSET
    common_names: list[str] | None = strawberry.UNSET
    description: str | None = strawberry.UNSET
    history: str | None = strawberry.UNSET
    fun_fact: str | None = strawberry.UNSET
    health: str | None = strawberry.UNSET
    origin: str | None = strawberry.UNSET
    colors: list[str] | None = strawberry.UNSET
    average_height: float | None = strawberry.UNSET
    average_weight: float | None = strawberry.UNSET
    average_life_expectancy: float | None = strawberry.UNSET
    exercise_required: int | None = strawberry.UNSET
    ease_of_training: int | None = strawberry.UNSET
    affection: int | None = strawberry.UNSET
    playfulness: int | None = strawberry.UNSET
    good_with_children: int | None = strawberry.UNSET
    good_with_dogs: int | None = strawberry.UNSET
    grooming_required: int | None = strawberry.UNSET
    category_id: strawberry.ID | None = strawberry.UNSET


@strawberry.type
class DeleteBreedResponse:
    id: strawberry.ID
    success: bool
