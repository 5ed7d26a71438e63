"""Response envelope and content decoding."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from multidict import CIMultiDictProxy
from pydantic import TypeAdapter, ValidationError

from ...core.enums import StatusCode
from ...core.exceptions import DecodeError
from ...core.formatters import DEFAULT_FORMATTER, ISO8601Formatter

if TYPE_CHECKING:
    from .pagination import PageCursor

ContentT = TypeVar("ContentT")


@dataclass(frozen=True)
class Response(Generic[ContentT]):
    """Decoded content of one call plus the protocol metadata.

    Attributes:
        data: Decoded content. None only for a 304 with an empty body.
        status: Status code of the response
        headers: Response headers (case-insensitive)
        url: Final URL of the response, if the transport reports it
    """

    data: ContentT
    status: StatusCode
    headers: CIMultiDictProxy[str]
    url: str | None = None

    @property
    def not_modified(self) -> bool:
        return self.status is StatusCode.NOT_MODIFIED

    @property
    def next_cursor(self) -> PageCursor | None:
        """Cursor of the following page, for paginated content."""
        pages = getattr(self.data, "pages", None)
        if pages is None:
            return None
        return pages.next


@lru_cache(maxsize=128)
def _adapter(content_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(content_type)


def decode_content(
    content_type: Any,
    body: bytes,
    formatter: ISO8601Formatter = DEFAULT_FORMATTER,
) -> Any:
    """Decode a JSON body into the resource's content type.

    Raises:
        DecodeError: If the body does not match the content schema
    """
    try:
        return _adapter(content_type).validate_json(body, context={"formatter": formatter})
    except ValidationError as e:
        name = getattr(content_type, "__name__", repr(content_type))
        raise DecodeError(f"Failed to decode {name}: {e}") from e
