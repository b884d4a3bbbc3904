"""Offset/link and cursor pagination.

The two styles are deliberately kept apart. Offset pagination follows the
``next_page`` URL handed back by the server; cursor pagination echoes an
opaque ``after_cursor`` token back as ``page[after]``. Neither is derived
from the other.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

from pydantic import BaseModel, Field

from .options import QueryOptions

T = TypeVar("T")


class Page(BaseModel):
    """Offset pagination state returned next to the item array."""

    count: int = 0
    next_page: str | None = None
    previous_page: str | None = None

    @property
    def has_next(self) -> bool:
        # count is informational; only next_page decides continuation.
        return bool(self.next_page)


class CursorPagination(QueryOptions):
    """Cursor pagination request parameters."""

    page_size: int = Field(default=0, ge=0, alias="page[size]")
    page_after: str = Field(default="", alias="page[after]")
    page_before: str = Field(default="", alias="page[before]")


class CursorPaginationMeta(BaseModel):
    """Cursor pagination state returned under ``meta``."""

    has_more: bool = False
    after_cursor: str | None = None
    before_cursor: str | None = None

    @property
    def next_cursor(self) -> str | None:
        """The token to continue with, or ``None`` on the last page."""
        if not self.has_more or not self.after_cursor:
            return None
        return self.after_cursor


async def iter_offset(
    fetch: Callable[[str], Awaitable[tuple[list[T], Page]]],
    url: str,
) -> AsyncIterator[T]:
    """Yield items page by page, requesting each ``next_page`` URL verbatim."""
    next_url: str | None = url
    while next_url:
        items, page = await fetch(next_url)
        for item in items:
            yield item
        next_url = page.next_page if page.has_next else None


async def iter_cursor(
    fetch: Callable[[str | None], Awaitable[tuple[list[T], CursorPaginationMeta]]],
) -> AsyncIterator[T]:
    """Yield items page by page, passing each ``after_cursor`` to *fetch*.

    *fetch* receives ``None`` for the first page.
    """
    cursor: str | None = None
    while True:
        items, meta = await fetch(cursor)
        for item in items:
            yield item
        cursor = meta.next_cursor
        if cursor is None:
            return
