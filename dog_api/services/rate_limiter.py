"""
Rate Limiting Service

Protects the API from abuse at two levels:

1. HTTP requests: slowapi applies ``rate_limit_default`` to every route
   (including POST /graphql) through SlowAPIMiddleware.
2. GraphQL operations: queries and mutations are counted separately per
   client IP with the ``limits`` library that slowapi is built on.

Rate Limit Tiers:
=================
- Default (any HTTP request): 100 requests / 15 minutes
- GraphQL queries: 200 operations / 15 minutes
- GraphQL mutations: 50 operations / 15 minutes

Counters live in ``rate_limit_storage_uri`` (memory:// by default, a
redis:// URI shares them between workers).
"""

import logging
from functools import lru_cache

from fastapi import Request
from limits import parse
from limits.storage import storage_from_string
from limits.strategies import FixedWindowRateLimiter
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from dog_api.config import get_settings
from dog_api.errors import RateLimitedError

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Handles common proxy headers to get the real client IP.
    Falls back to direct connection IP if no proxy headers.
    """
    # X-Forwarded-For can contain multiple IPs; first is the client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    # nginx
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """
    Create and configure the HTTP rate limiter.

    Returns:
        Configured Limiter instance
    """
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Handler for HTTP-level rate limit errors.

    Returns a 429 with the same code GraphQL clients see for
    operation-level limits.
    """
    limit_detail = str(exc.detail)

    response = JSONResponse(
        status_code=429,
        content={
            "error": "RATE_LIMITED",
            "message": "Too many requests, please try again later.",
            "detail": limit_detail,
        },
    )
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}")

    return response


# =============================================================================
# GraphQL operation limits
# =============================================================================


@lru_cache
def get_operation_limiter() -> FixedWindowRateLimiter:
    """Shared fixed-window limiter for GraphQL operations."""
    return FixedWindowRateLimiter(storage_from_string(settings.rate_limit_storage_uri))


def check_operation_limit(
    client: str,
    operation_type: str,
    operation_limiter: FixedWindowRateLimiter | None = None,
) -> None:
    """
    Count one GraphQL operation for ``client``.

    Mutations use ``mutation_rate_limit``; everything else counts as a query.

    Raises:
        RateLimitedError: If the client is over its limit for this window
    """
    operation_limiter = operation_limiter or get_operation_limiter()
    if operation_type == "mutation":
        limit = parse(settings.mutation_rate_limit)
    else:
        limit = parse(settings.query_rate_limit)

    if not operation_limiter.hit(limit, "graphql", operation_type, client):
        logger.warning(f"GraphQL {operation_type} limit exceeded for {client}: {limit}")
        raise RateLimitedError(
            f"Too many {operation_type} operations, please try again later."
        )
