"""Runtime: request building, transport, classification and pagination."""

from .rest import (
    BaseResource,
    HTTPRequest,
    PageCursor,
    RawResponse,
    Resource,
    Response,
    RESTTransport,
    Transport,
)

__all__ = [
    "BaseResource",
    "HTTPRequest",
    "PageCursor",
    "RawResponse",
    "Resource",
    "Response",
    "RESTTransport",
    "Transport",
]
