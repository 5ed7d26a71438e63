"""Request construction.

``build_request`` composes a fully formed ``HTTPRequest`` from a resource
descriptor, the client configuration and an optional page cursor.

Request Flow:
    1. Target URL = versioned base URL + descriptor path
    2. Cache policy taken from the descriptor
    3. Page cursor appended as ``page_after_id`` (if supplied)
    4. Fixed headers from the configuration
    5. Descriptor hook (query filters, HTTP method)
    6. JSON body encoding (if the descriptor declares a body)

The hook runs after the fixed headers, so a descriptor may override the
method but the headers are already in place. Given identical inputs the
output is identical.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from pydantic import PydanticUserError, TypeAdapter
from pydantic_core import PydanticSerializationError

from ...core.config import APPLICATION_JSON, Configuration
from ...core.enums import CachePolicy
from ...core.exceptions import EncodeError
from ...core.formatters import DEFAULT_FORMATTER, ISO8601Formatter

if TYPE_CHECKING:
    from .pagination import PageCursor
    from .resource import Resource


@dataclass
class HTTPRequest:
    """A prepared HTTP request, ready for a transport."""

    url: str
    method: str = "GET"
    params: list[tuple[str, str]] = field(default_factory=list)
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE_POLICY
    formatter: ISO8601Formatter = DEFAULT_FORMATTER

    def add_query(self, key: str, value: Any) -> None:
        """Append a query item unless the value is unset or an empty collection."""
        encoded = encode_query_value(value, self.formatter)
        if encoded is not None:
            self.params.append((key, encoded))

    def query_values(self, key: str) -> list[str]:
        return [v for k, v in self.params if k == key]

    @property
    def full_url(self) -> str:
        if not self.params:
            return self.url
        return f"{self.url}?{urlencode(self.params, safe=',:')}"


def encode_query_value(value: Any, formatter: ISO8601Formatter = DEFAULT_FORMATTER) -> str | None:
    """Encode a filter value the way the API expects it in a query string.

    Returns:
        The encoded value, or None if the item should be omitted
    """
    if value is None:
        return None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return formatter.encode(value)
    if isinstance(value, (str, int)):
        return str(value)
    if isinstance(value, Iterable):
        parts = [encode_query_value(item, formatter) for item in value]
        joined = ",".join(p for p in parts if p is not None)
        return joined or None
    return str(value)


def encode_body(body: Any, formatter: ISO8601Formatter = DEFAULT_FORMATTER) -> bytes:
    """Serialize a request body to JSON.

    Raises:
        EncodeError: If the body cannot be serialized
    """
    try:
        adapter: TypeAdapter[Any] = TypeAdapter(type(body))
        return adapter.dump_json(body, context={"formatter": formatter})
    except (PydanticSerializationError, PydanticUserError, TypeError, ValueError) as e:
        raise EncodeError(f"Failed to encode request body {type(body).__name__}: {e}") from e


def build_request(
    resource: Resource,
    configuration: Configuration,
    cursor: PageCursor | None = None,
    *,
    formatter: ISO8601Formatter = DEFAULT_FORMATTER,
) -> HTTPRequest:
    """Build the HTTP request for a resource descriptor.

    Args:
        resource: Descriptor of the API operation
        configuration: Client configuration (version, user agent, token)
        cursor: Optional page cursor, appended as ``page_after_id``
        formatter: Timestamp formatter for query values and the body

    Returns:
        The prepared request

    Raises:
        EncodeError: If the descriptor's body cannot be serialized
    """
    request = HTTPRequest(
        url=configuration.version.url_for(resource.path),
        cache_policy=resource.cache_policy,
        formatter=formatter,
    )

    if cursor is not None:
        cursor.apply(request)

    configuration.apply_headers(request)
    resource.mutate_request(request)

    if resource.body is not None:
        request.headers["Content-Type"] = APPLICATION_JSON
        request.body = encode_body(resource.body, formatter)

    return request
