"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime


class WaniKaniError(Exception):
    """Base exception for all library errors."""

    pass


class EncodeError(WaniKaniError):
    """A request body could not be serialized.

    Raised before any network activity takes place.
    """

    pass


class DecodeError(WaniKaniError):
    """A response body did not match the expected content schema."""

    pass


class IncompatibleResponseError(WaniKaniError):
    """The response carried a status code outside the known set."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.headers = dict(headers or {})


class RateLimitError(WaniKaniError):
    """Rate limit exceeded.

    Built from the ``Ratelimit-*`` headers of a 429 response. This is a
    distinguished outcome and not a ``StatusCodeError``.
    """

    def __init__(self, limit: int, remaining: int, reset: datetime) -> None:
        super().__init__(
            f"Rate limit exceeded ({remaining}/{limit} remaining, resets at {reset.isoformat()})"
        )
        self.limit = limit
        self.remaining = remaining
        self.reset = reset

    @property
    def status_code(self) -> int:
        return 429

    def retry_after(self, now: float) -> float:
        """Seconds to wait from ``now`` (epoch seconds) until the window resets."""
        return max(0.0, self.reset.timestamp() - now)


class StatusCodeError(WaniKaniError):
    """Non-success status without a decodable error body."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Request failed with status code {status_code}")
        self.status_code = status_code


class APIError(StatusCodeError):
    """Error reported by the API as ``{"code": ..., "error": ...}``."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(
            status_code,
            f"WaniKani API error {status_code}: {message}"
            if message
            else f"WaniKani API error {status_code}",
        )
        self.message = message
