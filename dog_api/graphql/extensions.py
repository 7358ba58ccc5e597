"""
GraphQL Schema Extensions

OperationRateLimiter counts every GraphQL operation against the per-client
query or mutation limit before it executes.

Usage:
    schema = strawberry.Schema(
        query=Query,
        mutation=Mutation,
        extensions=[OperationRateLimiter],
    )
"""

from collections.abc import Iterator

from strawberry.extensions import SchemaExtension

from dog_api.config import get_settings
from dog_api.services.rate_limiter import check_operation_limit, get_client_ip


class OperationRateLimiter(SchemaExtension):
    """
    Reject operations from clients over their limit with RATE_LIMITED.

    Disabled together with HTTP rate limiting (``RATE_LIMIT_ENABLED=false``).
    """

    def on_execute(self) -> Iterator[None]:
        if get_settings().rate_limit_enabled:
            operation_type = self.execution_context.operation_type
            request = getattr(self.execution_context.context, "request", None)
            client = get_client_ip(request) if request is not None else "anonymous"
            check_operation_limit(client, operation_type.value)
        yield
