"""Transport boundary.

A transport executes one prepared request and returns the raw response. The
client treats it as an injected dependency: ``RESTTransport`` is the
production implementation on top of aiohttp, and tests substitute a fake
that replays canned responses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ...core.enums import CachePolicy
from ...utils.http import HTTPClient
from .raw import RawResponse

if TYPE_CHECKING:
    from .request import HTTPRequest

__all__ = ["RawResponse", "RESTTransport", "Transport"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything able to send a prepared request."""

    async def send(self, request: HTTPRequest) -> RawResponse: ...


class RESTTransport:
    """aiohttp-backed transport.

    Owns an ``HTTPClient`` session for its lifetime; call ``close()`` or use
    it as an async context manager.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self._http = HTTPClient(timeout=timeout)

    async def send(self, request: HTTPRequest) -> RawResponse:
        if request.cache_policy is not CachePolicy.USE_PROTOCOL_CACHE_POLICY:
            # No local cache here; the hint is only meaningful to caching transports.
            logger.debug(
                "Ignoring cache policy", extra={"cache_policy": request.cache_policy.value}
            )
        return await self._http.request(
            request.method,
            request.url,
            params=request.params,
            headers=request.headers,
            data=request.body,
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
