"""WaniKani API client.

The client is the single entry point for talking to the API. It owns the
configuration and the timestamp formatter and drives one call through the
REST pipeline.

Architecture:
    send(resource, cursor)
        1. build_request      descriptor + configuration + cursor -> HTTPRequest
        2. transport.send     HTTPRequest -> RawResponse (errors propagate as-is)
        3. classify_response  status/headers/body -> StatusCode or typed error
        4. decode_content     body -> resource.content
    paginate(resource, start)
        repeats send() following each page's next cursor

Design Decisions:
    - Transport injection allows testing with a replaying fake
    - A client only closes the transport it created itself
    - ``send`` never retries; the only retry is the rate-limit backoff inside
      ``paginate``
    - Sleep and clock are injectable so the backoff can be tested without
      real waiting

See Also:
    - wanikani.resources: Descriptors for every API operation
    - wanikani.runtime.rest: Request builder, classifier and pagination
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import replace
from typing import Any

from .core.config import Configuration
from .core.enums import StatusCode
from .core.formatters import DEFAULT_FORMATTER, ISO8601Formatter
from .runtime.rest.classifier import classify_response
from .runtime.rest.pagination import PageCursor, paginate
from .runtime.rest.request import build_request
from .runtime.rest.resource import Resource
from .runtime.rest.response import Response, decode_content
from .runtime.rest.telemetry import log_request_sent
from .runtime.rest.transport import RESTTransport, Transport

logger = logging.getLogger(__name__)


class WaniKani:
    """Asynchronous client for the WaniKani API.

    Example:
        >>> async with WaniKani(token="...") as client:
        ...     response = await client.send(resources.user())
        ...     print(response.data.username)
        ...
        ...     async for page in client.paginate(resources.assignments(started=True)):
        ...         print(page.data.total_count, len(page.data))
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        transport: Transport | None = None,
        *,
        token: str | None = None,
        formatter: ISO8601Formatter = DEFAULT_FORMATTER,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the client.

        Args:
            configuration: API version, user agent and token (default: API v2, no token)
            transport: Transport used to send requests (default: a new RESTTransport)
            token: API token; overrides the configuration's token when given
            formatter: Timestamp formatter for bodies, query values and responses
            sleep: Awaitable sleep used for the rate-limit backoff
            clock: Current time in epoch seconds
        """
        configuration = configuration or Configuration.default()
        if token is not None:
            configuration = replace(configuration, token=token)
        self.configuration = configuration
        self._owns_transport = transport is None
        self._transport: Transport = transport or RESTTransport()
        self._formatter = formatter
        self._sleep = sleep
        self._clock = clock
        self._closed = False

    @property
    def token(self) -> str | None:
        return self.configuration.token

    @token.setter
    def token(self, value: str | None) -> None:
        self.configuration.token = value

    @property
    def transport(self) -> Transport:
        return self._transport

    async def send(self, resource: Resource, cursor: PageCursor | None = None) -> Response[Any]:
        """Send one request and decode its response.

        Args:
            resource: Descriptor of the API operation
            cursor: Optional page cursor for list resources

        Returns:
            The decoded content with the response status and headers. The
            content is None only for a 304 with an empty body.

        Raises:
            EncodeError: If the request body cannot be serialized (nothing is sent)
            IncompatibleResponseError: If the status code is not a known one
            RateLimitError: On a 429 with well-formed rate-limit headers
            APIError: On an error status with a decodable error body
            StatusCodeError: On any other error status
            DecodeError: If the body does not match the expected content
        """
        request = build_request(resource, self.configuration, cursor, formatter=self._formatter)
        log_request_sent(request)

        raw = await self._transport.send(request)
        status = classify_response(raw)

        if status is StatusCode.NOT_MODIFIED and not raw.body:
            data = None
        else:
            data = decode_content(resource.content, raw.body, self._formatter)

        return Response(data=data, status=status, headers=raw.headers, url=raw.url)

    def paginate(
        self,
        resource: Resource,
        start: PageCursor | None = None,
        *,
        wait_on_rate_limit: bool = True,
    ) -> AsyncIterator[Response[Any]]:
        """Stream every page of a list resource, one request at a time.

        Args:
            resource: List resource descriptor
            start: Cursor to resume after, or None for the first page
            wait_on_rate_limit: Sleep until the rate-limit window resets and
                retry the same page (default), or raise ``RateLimitError``

        Returns:
            Async iterator of one response per page
        """
        return paginate(
            self.send,
            resource,
            start,
            wait_on_rate_limit=wait_on_rate_limit,
            sleep=self._sleep,
            clock=self._clock,
        )

    async def close(self) -> None:
        """Close the client and the transport it created."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing WaniKani client")
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> WaniKani:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
