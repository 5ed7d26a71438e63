"""REST runtime abstractions."""

from .classifier import ErrorBody, RateLimitState, classify_response, parse_rate_limit
from .pagination import PAGE_AFTER_ID, PageCursor, paginate
from .request import HTTPRequest, build_request, encode_body, encode_query_value
from .resource import BaseResource, Resource, add_filters, freeze
from .response import Response, decode_content
from .raw import RawResponse
from .transport import RESTTransport, Transport

__all__ = [
    "BaseResource",
    "Resource",
    "add_filters",
    "freeze",
    "HTTPRequest",
    "build_request",
    "encode_body",
    "encode_query_value",
    "RawResponse",
    "Transport",
    "RESTTransport",
    "ErrorBody",
    "RateLimitState",
    "classify_response",
    "parse_rate_limit",
    "Response",
    "decode_content",
    "PAGE_AFTER_ID",
    "PageCursor",
    "paginate",
]
