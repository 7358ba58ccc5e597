"""
GraphQL Context

Provides request context to all GraphQL resolvers including:
- Database session for the request
- Breed and category repositories bound to that session
- Fresh batch loaders (never shared between requests)

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter. Strawberry also sets
``request`` on it, which the rate limiter uses to identify the client.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from dog_api.database import get_db
from dog_api.graphql.loaders import Loaders
from dog_api.repositories import BreedRepository, CategoryRepository


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        db: SQLAlchemy database session
        breeds: Breed repository
        categories: Category repository
        loaders: Request-scoped DataLoaders
    """

    def __init__(self, db: Session):
        super().__init__()
        self.db = db
        self.breeds = BreedRepository(db)
        self.categories = CategoryRepository(db)
        self.loaders = Loaders(breeds=self.breeds, categories=self.categories)


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    The session comes from the ``get_db`` dependency, so it is closed
    when the response is sent and tests can override it.
    """
    return GraphQLContext(db=db)
