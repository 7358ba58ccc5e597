"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.

Update inputs default every field to UNSET, so only the fields present in
the request reach the service. Validation, not-found and constraint
failures are raised as domain errors and reported with their code.
"""

from typing import Any

import strawberry
from strawberry.types import Info

from dog_api.graphql.context import GraphQLContext
from dog_api.graphql.types.breed import (
    BreedType,
    CreateBreedInput,
    DeleteBreedResponse,
    UpdateBreedInput,
    breed_to_graphql,
)
from dog_api.graphql.types.category import (
    CategoryType,
    CreateCategoryInput,
    DeleteCategoryResponse,
    UpdateCategoryInput,
    category_to_graphql,
)
from dog_api.services import breeds as breed_service
from dog_api.services import categories as category_service


def provided_fields(input: Any) -> dict[str, Any]:
    """Fields of a Strawberry input that the client actually sent."""
    return {
        key: value
        for key, value in vars(input).items()
        if value is not strawberry.UNSET
    }


@strawberry.type
class Mutation:
    """GraphQL Mutation type containing all write operations."""

    # =========================================================================
    # Breed Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new breed")
    def create_breed(
        self,
        info: Info[GraphQLContext, None],
        input: CreateBreedInput,
    ) -> BreedType:
        breed = breed_service.create_breed(info.context.breeds, provided_fields(input))
        return breed_to_graphql(breed)

    @strawberry.mutation(description="Update an existing breed")
    def update_breed(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        input: UpdateBreedInput,
    ) -> BreedType:
        """
        Partially update a breed.

        Only fields included in the input change; commonNames and funFact
        can be cleared with null.
        """
        breed = breed_service.update_breed(info.context.breeds, id, provided_fields(input))
        return breed_to_graphql(breed)

    @strawberry.mutation(description="Delete a breed")
    def delete_breed(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> DeleteBreedResponse:
        result = breed_service.delete_breed(info.context.breeds, id)
        return DeleteBreedResponse(id=result["id"], success=result["success"])

    # =========================================================================
    # Category Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new category")
    def create_category(
        self,
        info: Info[GraphQLContext, None],
        input: CreateCategoryInput,
    ) -> CategoryType:
        category = category_service.create_category(
            info.context.categories, provided_fields(input)
        )
        return category_to_graphql(category)

    @strawberry.mutation(description="Update an existing category")
    def update_category(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        input: UpdateCategoryInput,
    ) -> CategoryType:
        category = category_service.update_category(
            info.context.categories, id, provided_fields(input)
        )
        return category_to_graphql(category)

    @strawberry.mutation(description="Delete a category that has no breeds")
    def delete_category(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> DeleteCategoryResponse:
        """
        Delete a category.

        Fails with FOREIGN_KEY_VIOLATION while breeds still belong to it.
        """
        result = category_service.delete_category(info.context.categories, id)
        return DeleteCategoryResponse(id=result["id"], success=result["success"])
