"""
Domain Errors

Every error the API raises on purpose carries a stable machine-readable
code and an HTTP-like status. GraphQL picks both up from the exception's
``extensions`` attribute, so clients see:

    {
        "message": "Breed with ID '42' not found",
        "extensions": {"code": "RESOURCE_NOT_FOUND", "http": {"status": 404}}
    }

Errors that are not DogApiError instances (driver failures, bugs) are
converted by the GraphQL error formatter into DATABASE_ERROR or a masked
INTERNAL_SERVER_ERROR.
"""

from typing import Any

from sqlalchemy.exc import IntegrityError


class DogApiError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, code: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "http": {"status": self.status_code}}


class NotFoundError(DogApiError):
    """Raised when a record targeted by a write does not exist."""

    def __init__(self, resource: str, id: str):
        super().__init__(
            f"{resource} with ID '{id}' not found",
            "RESOURCE_NOT_FOUND",
            404,
        )


class ValidationError(DogApiError):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR", 400)


class ConflictError(DogApiError):
    """Raised on uniqueness violations (e.g. duplicate names)."""

    def __init__(self, message: str = "A record with this value already exists"):
        super().__init__(message, "CONFLICT", 409)


class ForeignKeyError(DogApiError):
    """Raised when a write references, or orphans, a related record."""

    def __init__(self, message: str = "Referenced record does not exist or is still in use"):
        super().__init__(message, "FOREIGN_KEY_VIOLATION", 400)


class RateLimitedError(DogApiError):
    """Raised when a client exceeds its GraphQL operation limit."""

    def __init__(self, message: str = "Too many requests, please try again later."):
        super().__init__(message, "RATE_LIMITED", 429)


class DatabaseError(DogApiError):
    """Generic store failure with internal details removed."""

    def __init__(self, message: str = "Database error occurred"):
        super().__init__(message, "DATABASE_ERROR", 500)


# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def translate_integrity_error(exc: IntegrityError, resource: str) -> DogApiError:
    """
    Map an IntegrityError from the driver to a domain error.

    psycopg2 exposes the SQLSTATE as ``pgcode``; SQLite only gives a
    message, so fall back to matching on it.
    """
    pgcode = getattr(exc.orig, "pgcode", None)
    detail = str(exc.orig).lower()

    if pgcode == UNIQUE_VIOLATION or (pgcode is None and "unique" in detail):
        return ConflictError(f"A {resource.lower()} with this value already exists")

    if pgcode == FOREIGN_KEY_VIOLATION or (pgcode is None and "foreign key" in detail):
        return ForeignKeyError(
            f"{resource} references a missing record or is still referenced"
        )

    return DatabaseError("Database operation failed")
