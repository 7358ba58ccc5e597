"""
Cursor Pagination

Relay-style connections over a repository.

Cursors
=======
A cursor is the base64 encoding of a row id. Cursors of the form
base64("cursor:<id>") are also accepted when decoding.

Paging
======
- after / first: forward. The store seeks to the cursor row, skips it and
  takes ``first`` rows (10 when omitted).
- before / last: backward. The store takes ``last`` rows preceding the
  cursor (a negative take) and they are reversed here so every page reads
  in sort order.
- ``after`` wins when both cursors are sent.

hasNextPage / hasPreviousPage compare the page length with the requested
size, so a page that exactly exhausts the rows still reports another page.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from dog_api.config import get_settings
from dog_api.errors import ValidationError

T = TypeVar("T")

CURSOR_PREFIX = "cursor:"


def encode_cursor(id: str) -> str:
    """Encode a row id as an opaque cursor."""
    return base64.b64encode(str(id).encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> str:
    """
    Decode a cursor back to the row id.

    Raises:
        ValidationError: If the cursor is not valid base64 text
    """
    try:
        value = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        raise ValidationError(f"Invalid cursor: {cursor!r}")

    if value.startswith(CURSOR_PREFIX):
        value = value[len(CURSOR_PREFIX):]
    if not value:
        raise ValidationError(f"Invalid cursor: {cursor!r}")
    return value


@dataclass
class PageRequest:
    """Store arguments for one page."""

    take: int
    cursor: Optional[dict[str, str]] = None
    skip: Optional[int] = None

    @property
    def backward(self) -> bool:
        return self.take < 0


@dataclass
class PageInfo:
    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None


@dataclass
class Edge(Generic[T]):
    node: T
    cursor: str


@dataclass
class Connection(Generic[T]):
    edges: list[Edge[T]] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)
    total_count: int = 0


def _check_size(name: str, value: Optional[int]) -> None:
    max_page_size = get_settings().max_page_size
    if value is None:
        return
    if value < 0:
        raise ValidationError(f"'{name}' must not be negative")
    if value > max_page_size:
        raise ValidationError(f"'{name}' must not exceed {max_page_size}")


def build_page_request(pagination: Any = None) -> PageRequest:
    """
    Compute cursor, skip and take for a PaginationInput.

    Raises:
        ValidationError: On a malformed cursor or an out-of-range page size
    """
    default_size = get_settings().default_page_size
    if pagination is None:
        return PageRequest(take=default_size)

    first, after = pagination.first, pagination.after
    last, before = pagination.last, pagination.before
    _check_size("first", first)
    _check_size("last", last)

    if after is not None:
        return PageRequest(
            take=first if first is not None else default_size,
            cursor={"id": decode_cursor(after)},
            skip=1,
        )

    if before is not None:
        return PageRequest(
            take=-(last if last is not None else default_size),
            cursor={"id": decode_cursor(before)},
            skip=1,
        )

    if last is not None and first is None:
        # Last page of the whole result set
        return PageRequest(take=-last)

    return PageRequest(take=first if first is not None else default_size)


def build_connection(rows: list[T], pagination: Any, total_count: int) -> Connection[T]:
    """Wrap rows, already in display order, in a Connection."""
    edges = [Edge(node=row, cursor=encode_cursor(row.id)) for row in rows]

    first = pagination.first if pagination is not None else None
    last = pagination.last if pagination is not None else None

    return Connection(
        edges=edges,
        page_info=PageInfo(
            has_next_page=bool(first) and len(edges) == first,
            has_previous_page=bool(last) and len(edges) == last,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        ),
        total_count=total_count,
    )


def paginate(
    store: Any,
    where: dict[str, Any],
    order_by: dict[str, str],
    pagination: Any = None,
) -> Connection:
    """
    Fetch one page of ``store`` rows as a Connection.

    The total count uses the same predicate and ignores paging.
    """
    page = build_page_request(pagination)

    total_count = store.count(where=where)
    rows = store.find_many(
        where=where,
        order_by=order_by,
        cursor=page.cursor,
        skip=page.skip,
        take=page.take,
    )

    if page.backward:
        rows = list(reversed(rows))

    return build_connection(rows, pagination, total_count)
