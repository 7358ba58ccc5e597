"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Breed and category types matching the SQLAlchemy models
- Filtering, sorting and Relay cursor pagination on list queries
- Create/update/delete mutations with validation
- Batched relationship loading (Breed.category, Category.breeds)
- Error codes in ``extensions`` and per-operation rate limits

Usage:
    The GraphQL endpoint is available at /graphql, with an in-browser
    IDE chosen by the GRAPHQL_IDE setting.

Example Query:
    query {
        breeds(filter: {nameContains: "collie"}, pagination: {first: 5}) {
            edges {
                cursor
                node { name category { name } }
            }
            pageInfo { hasNextPage endCursor }
            totalCount
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from dog_api.config import get_settings
from dog_api.graphql.context import get_context
from dog_api.graphql.errors import DomainErrorFormatter
from dog_api.graphql.extensions import OperationRateLimiter
from dog_api.graphql.mutations import Mutation
from dog_api.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[OperationRateLimiter, DomainErrorFormatter],
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=get_settings().graphql_ide,
    )


__all__ = ["schema", "create_graphql_router"]
