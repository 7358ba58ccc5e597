"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver hands the request's repository to a service and converts
the ORM rows it gets back into GraphQL types.
"""

import strawberry
from strawberry.types import Info

from dog_api.graphql.context import GraphQLContext
from dog_api.graphql.types.breed import (
    BreedConnection,
    BreedFilter,
    BreedSort,
    BreedType,
    breed_connection_to_graphql,
    breed_to_graphql,
)
from dog_api.graphql.types.category import (
    CategoryConnection,
    CategoryFilter,
    CategorySort,
    CategoryType,
    category_connection_to_graphql,
    category_to_graphql,
)
from dog_api.graphql.types.pagination import PaginationInput
from dog_api.services import breeds as breed_service
from dog_api.services import categories as category_service


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the repositories and loaders.
    """

    @strawberry.field(description="Get a cursor-paginated list of breeds")
    def breeds(
        self,
        info: Info[GraphQLContext, None],
        filter: BreedFilter | None = None,
        sort: BreedSort | None = None,
        pagination: PaginationInput | None = None,
    ) -> BreedConnection:
        """
        Get breeds with optional filtering, sorting and pagination.

        Args:
            filter: Field filters, ANDed together
            sort: Sort field and direction (default: name ascending)
            pagination: first/after or last/before (default: first 10)

        Returns:
            Breed connection with edges, pageInfo and totalCount
        """
        connection = breed_service.list_breeds(
            info.context.breeds, filter=filter, sort=sort, pagination=pagination
        )
        return breed_connection_to_graphql(connection)

    @strawberry.field(description="Get a single breed by ID")
    def breed(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> BreedType | None:
        breed = breed_service.get_breed(info.context.breeds, id)
        if breed is None:
            return None
        return breed_to_graphql(breed)

    @strawberry.field(description="Get a cursor-paginated list of categories")
    def categories(
        self,
        info: Info[GraphQLContext, None],
        filter: CategoryFilter | None = None,
        sort: CategorySort | None = None,
        pagination: PaginationInput | None = None,
    ) -> CategoryConnection:
        connection = category_service.list_categories(
            info.context.categories, filter=filter, sort=sort, pagination=pagination
        )
        return category_connection_to_graphql(connection)

    @strawberry.field(description="Get a single category by ID")
    def category(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> CategoryType | None:
        category = category_service.get_category(info.context.categories, id)
        if category is None:
            return None
        return category_to_graphql(category)
