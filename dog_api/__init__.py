"""
Dog Breeds API Application Package

GraphQL API for browsing and managing dog breeds and the categories
they belong to.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- errors.py: Domain errors with stable machine-readable codes
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models
- schemas/: Pydantic validation schemas for mutation inputs
- repositories/: Query-builder store used by the services
- services/: Filtering, cursor pagination and CRUD orchestration
- graphql/: Strawberry schema, resolvers and batched loaders
- utils/: Helper functions
"""

__version__ = "0.1.0"
