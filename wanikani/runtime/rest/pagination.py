"""Cursor-based pagination.

List endpoints return a ``pages.next_url`` whose ``page_after_id`` query item
is the cursor of the following page. ``paginate`` follows those cursors
lazily, one request at a time, and ends the first time a page has no next
cursor, whatever the size of that page.

Stream States:
    NotStarted -> first request without a cursor
    HasCursor(c) -> request with cursor c, then replace c with the next one
    Exhausted -> no next cursor on the last page; the stream ends

A rate-limit outcome either suspends until the window resets and retries the
same request (no limit on the number of retries), or, with backoff disabled,
ends the stream by raising ``RateLimitError``. Every other error propagates
to the consumer and ends the stream.
"""

from __future__ import annotations

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlsplit

from ...core.exceptions import RateLimitError
from .telemetry import log_page_fetched, log_rate_limited

if TYPE_CHECKING:
    from .request import HTTPRequest
    from .resource import Resource
    from .response import Response

PAGE_AFTER_ID = "page_after_id"


@dataclass(frozen=True)
class PageCursor:
    """Opaque "resume after the record with this ID" token."""

    after_id: int

    @classmethod
    def from_url(cls, url: str | None) -> PageCursor | None:
        """Extract the cursor from a page URL.

        Returns:
            The cursor, or None if the URL has no parseable ``page_after_id``
        """
        if not url:
            return None
        for key, value in parse_qsl(urlsplit(str(url)).query):
            if key != PAGE_AFTER_ID:
                continue
            try:
                return cls(after_id=int(value))
            except ValueError:
                return None
        return None

    def apply(self, request: HTTPRequest) -> None:
        request.add_query(PAGE_AFTER_ID, self.after_id)


SendFunc = Callable[["Resource", "PageCursor | None"], Awaitable["Response[Any]"]]


async def paginate(
    send: SendFunc,
    resource: Resource,
    start: PageCursor | None = None,
    *,
    wait_on_rate_limit: bool = True,
    sleep: Callable[[float], Awaitable[Any]],
    clock: Callable[[], float] = time.time,
) -> AsyncIterator[Response[Any]]:
    """Stream every page of a list resource.

    Args:
        send: Coroutine function sending one resource with an optional cursor
        resource: List resource descriptor
        start: Cursor to start after, or None for the first page
        wait_on_rate_limit: Sleep until the reset time and retry on 429
        sleep: Awaitable sleep used for the backoff
        clock: Current time in epoch seconds

    Yields:
        One response envelope per page
    """
    cursor = start
    page_index = 0
    while True:
        try:
            response = await send(resource, cursor)
        except RateLimitError as e:
            if not wait_on_rate_limit:
                raise
            delay = e.retry_after(clock())
            log_rate_limited(
                limit=e.limit,
                remaining=e.remaining,
                reset_epoch=e.reset.timestamp(),
                delay=delay,
            )
            await sleep(delay)
            continue

        next_cursor = response.next_cursor
        log_page_fetched(
            page_index=page_index,
            after_id=cursor.after_id if cursor else None,
            has_next=next_cursor is not None,
        )
        yield response

        if next_cursor is None:
            return
        cursor = next_cursor
        page_index += 1
