"""
GraphQL Error Formatting

Every error in a GraphQL response is logged and normalised here:

- DogApiError (not found, validation, conflict, ...): returned as raised,
  with its ``code`` and ``http.status`` extensions.
- Other SQLAlchemy errors: replaced by a DATABASE_ERROR.
- Anything else: INTERNAL_SERVER_ERROR, with the message masked unless
  debug mode is on.
- Errors raised by GraphQL itself (syntax, unknown fields, bad variables)
  are left alone.
"""

import logging
from collections.abc import Iterator

from graphql import GraphQLError
from sqlalchemy.exc import SQLAlchemyError
from strawberry.extensions import SchemaExtension

from dog_api.config import get_settings
from dog_api.errors import DatabaseError, DogApiError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_SERVER_ERROR"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _replace(error: GraphQLError, message: str, extensions: dict) -> GraphQLError:
    return GraphQLError(
        message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        extensions=extensions,
    )


def format_error(error: GraphQLError) -> GraphQLError:
    """Log one error and return the version that is sent to the client."""
    original = error.original_error

    if original is None:
        logger.info(f"GraphQL request error: {error.message}")
        return error

    if isinstance(original, DogApiError):
        logger.warning(f"{original.code} at {error.path}: {original.message}")
        return error

    debug = get_settings().debug

    if isinstance(original, SQLAlchemyError):
        logger.error(f"Database error at {error.path}: {original}", exc_info=original)
        replacement = DatabaseError()
        message = str(original) if debug else replacement.message
        return _replace(error, message, replacement.extensions)

    logger.error(f"Unhandled error at {error.path}: {original}", exc_info=original)
    message = str(original) if debug else INTERNAL_ERROR_MESSAGE
    return _replace(
        error, message, {"code": INTERNAL_ERROR_CODE, "http": {"status": 500}}
    )


class DomainErrorFormatter(SchemaExtension):
    """Apply ``format_error`` to every error of an operation's result."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        if result is not None and result.errors:
            result.errors = [format_error(error) for error in result.errors]
