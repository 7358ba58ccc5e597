"""
Services Package

This package contains business logic services that are:
- Separate from GraphQL handling (resolvers)
- Reusable from scripts and tests
- Easier to test in isolation against a mock store

Current services:
- breeds.py: Breed listing, lookup and validated writes
- categories.py: Category listing, lookup and validated writes
- filters.py: Filter and sort inputs to repository predicates
- pagination.py: Cursor encoding and Relay connection building
- rate_limiter.py: HTTP (slowapi) and GraphQL operation rate limits
"""
