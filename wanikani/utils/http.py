"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from ..runtime.rest.raw import RawResponse

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Returns raw status, headers and body for every response, whatever the
    status code. Connection failures and timeouts propagate unchanged.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Sequence[tuple[str, str]] | None = None,
        headers: Mapping[str, str] | None = None,
        data: bytes | None = None,
    ) -> RawResponse:
        """Send a request and read the whole body."""
        kwargs: dict[str, Any] = {"headers": dict(headers or {})}
        if params:
            kwargs["params"] = list(params)
        if data is not None:
            kwargs["data"] = data

        async with self.session.request(method, url, **kwargs) as response:
            body = await response.read()
            return RawResponse(
                status=response.status,
                headers=response.headers,
                body=body,
                url=str(response.url),
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
