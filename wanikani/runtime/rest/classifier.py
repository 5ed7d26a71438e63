"""Response classification.

Maps a raw response to success or to one of the error outcomes, in order:

1. Status outside the known set -> ``IncompatibleResponseError``
2. 200 / 304 -> success
3. 429 with well-formed ``Ratelimit-Limit``, ``Ratelimit-Remaining`` and
   ``Ratelimit-Reset`` headers -> ``RateLimitError``
4. Body decodes as ``{"code": int, "error": str?}`` -> ``APIError``
5. Otherwise -> ``StatusCodeError`` carrying the bare status code

A 429 with missing or malformed rate-limit headers falls through to steps 4
and 5 instead of failing on the headers.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, ValidationError

from ...core.enums import StatusCode
from ...core.exceptions import (
    APIError,
    IncompatibleResponseError,
    RateLimitError,
    StatusCodeError,
)
from .telemetry import log_response_classified
from .raw import RawResponse

RATE_LIMIT_LIMIT_HEADER = "Ratelimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "Ratelimit-Remaining"
RATE_LIMIT_RESET_HEADER = "Ratelimit-Reset"

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class RateLimitState:
    """Rate limit window reported on a 429 response."""

    limit: int
    remaining: int
    reset: datetime

    def to_error(self) -> RateLimitError:
        return RateLimitError(limit=self.limit, remaining=self.remaining, reset=self.reset)


class ErrorBody(BaseModel):
    """Error payload returned by the API on failures."""

    code: int
    error: str | None = None

    model_config = ConfigDict(frozen=True)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    raw = raw.strip()
    if not _INTEGER_RE.match(raw):
        return None
    return int(raw)


def parse_rate_limit(headers: Mapping[str, str]) -> RateLimitState | None:
    """Parse the rate-limit header triple.

    Returns:
        The parsed state, or None if any header is missing or malformed
    """
    limit = _parse_int(headers.get(RATE_LIMIT_LIMIT_HEADER))
    remaining = _parse_int(headers.get(RATE_LIMIT_REMAINING_HEADER))
    reset_epoch = _parse_int(headers.get(RATE_LIMIT_RESET_HEADER))
    if limit is None or remaining is None or reset_epoch is None:
        return None
    try:
        reset = datetime.fromtimestamp(reset_epoch, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None
    return RateLimitState(limit=limit, remaining=remaining, reset=reset)


def classify_response(response: RawResponse) -> StatusCode:
    """Check a raw response for issues.

    Returns:
        The (successful) status code

    Raises:
        IncompatibleResponseError: Status code outside the known set
        RateLimitError: 429 with well-formed rate-limit headers
        APIError: Non-success status with a decodable error body
        StatusCodeError: Non-success status otherwise
    """
    status = StatusCode.from_status(response.status)
    if status is None:
        log_response_classified(response, "incompatible")
        raise IncompatibleResponseError(
            f"Incompatible response: unexpected status code {response.status}",
            status=response.status,
            headers=response.headers,
        )

    if status.is_success:
        log_response_classified(response, "success")
        return status

    if status is StatusCode.TOO_MANY_REQUESTS:
        state = parse_rate_limit(response.headers)
        if state is not None:
            log_response_classified(response, "rate_limited")
            raise state.to_error()

    try:
        error = ErrorBody.model_validate_json(response.body)
    except ValidationError:
        log_response_classified(response, "status_error")
        raise StatusCodeError(int(status)) from None

    log_response_classified(response, "api_error")
    raise APIError(error.code, error.error)
