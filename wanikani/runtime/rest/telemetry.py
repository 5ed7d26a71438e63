"""Structured logging for the request pipeline.

Every helper emits one event name as the message plus an ``extra`` payload.
Credentials never appear in the payload: requests are logged by method and
URL only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .request import HTTPRequest
    from .raw import RawResponse

logger = logging.getLogger(__name__)


def log_request_sent(request: HTTPRequest) -> None:
    """Log a request about to be handed to the transport."""
    logger.debug(
        "request_sent",
        extra={
            "method": request.method,
            "url": request.full_url,
            "has_body": request.body is not None,
            "cache_policy": request.cache_policy.value,
        },
    )


def log_response_classified(response: RawResponse, outcome: str) -> None:
    """Log the classification outcome of a response.

    Args:
        response: Raw response from the transport
        outcome: One of "success", "rate_limited", "api_error", "status_error", "incompatible"
    """
    level = logging.DEBUG if outcome == "success" else logging.WARNING
    logger.log(
        level,
        "response_classified",
        extra={
            "status": response.status,
            "url": response.url,
            "outcome": outcome,
            "body_bytes": len(response.body),
        },
    )


def log_rate_limited(*, limit: int, remaining: int, reset_epoch: float, delay: float) -> None:
    """Log a rate-limit backoff before retrying the same page."""
    logger.info(
        "rate_limited_backoff",
        extra={
            "limit": limit,
            "remaining": remaining,
            "reset_epoch": reset_epoch,
            "delay_seconds": round(delay, 3),
        },
    )


def log_page_fetched(*, page_index: int, after_id: int | None, has_next: bool) -> None:
    """Log completion of a single page in a pagination stream."""
    logger.debug(
        "page_fetched",
        extra={
            "page_index": page_index,
            "after_id": after_id,
            "has_next": has_next,
        },
    )
