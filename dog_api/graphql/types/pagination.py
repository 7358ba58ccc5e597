"""
GraphQL Pagination Types

Shared Relay pagination input/output types and the sort direction enum.
"""

from enum import Enum

import strawberry

from dog_api.services.pagination import PageInfo


@strawberry.enum
class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@strawberry.input
class PaginationInput:
    """
    Cursor pagination arguments.

    Use ``first``/``after`` to page forward and ``last``/``before`` to page
    backward. Cursors come from ``pageInfo`` or ``edges.cursor``.
    """

    first: int | None = None
    after: str | None = None
    last: int | None = None
    before: str | None = None


@strawberry.type(name="PageInfo")
class PageInfoType:
    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None = None
    end_cursor: str | None = None


def page_info_to_graphql(page_info: PageInfo) -> PageInfoType:
    return PageInfoType(
        has_next_page=page_info.has_next_page,
        has_previous_page=page_info.has_previous_page,
        start_cursor=page_info.start_cursor,
        end_cursor=page_info.end_cursor,
    )
