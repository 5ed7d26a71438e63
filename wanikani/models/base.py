"""Shared model machinery.

Architecture:
    Every top-level resource is sent by the API in the same envelope::

        {"id": ..., "object": "<kind>", "url": ..., "data_updated_at": ...,
         "data": {...resource fields...}}

    ``ResourceModel`` flattens that envelope on input and re-nests it on
    output, so a model exposes plain attributes and still round-trips to the
    wire shape. ``object`` is a ``Literal`` on each subclass, which both
    rejects mismatched payloads and lets the subject union pick its variant
    by discriminant.

Design Decisions:
    - Frozen pydantic v2 models with the wire's snake_case field names
    - Timestamps go through an ``ISO8601Formatter`` taken from the pydantic
      validation/serialization context, falling back to the default instance
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from typing import Annotated, Any, ClassVar, Generic, Literal, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
    model_validator,
)

from ..core.formatters import DEFAULT_FORMATTER, ISO8601Formatter
from ..runtime.rest.pagination import PageCursor


def formatter_from_context(context: Any) -> ISO8601Formatter:
    """Pick the formatter passed in a pydantic context, else the default."""
    if isinstance(context, dict):
        formatter = context.get("formatter")
        if isinstance(formatter, ISO8601Formatter):
            return formatter
    return DEFAULT_FORMATTER


def _decode_timestamp(value: Any, info: ValidationInfo) -> Any:
    if isinstance(value, str):
        return formatter_from_context(info.context).decode(value)
    return value


def _encode_timestamp(value: datetime, info: SerializationInfo) -> str:
    return formatter_from_context(info.context).encode(value)


Timestamp = Annotated[
    datetime,
    BeforeValidator(_decode_timestamp),
    PlainSerializer(_encode_timestamp, return_type=str, when_used="json"),
]


class WaniKaniModel(BaseModel):
    """Base for every model: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ResourceModel(WaniKaniModel):
    """A top-level resource wrapped in the standard envelope."""

    _envelope_keys: ClassVar[tuple[str, ...]] = ("id", "object", "url", "data_updated_at")

    object: str
    url: str
    data_updated_at: Timestamp | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_envelope(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        data = value.get("data")
        if not isinstance(data, dict):
            return value
        flat = {key: item for key, item in value.items() if key != "data"}
        flat.update(data)
        return flat

    @model_serializer(mode="wrap")
    def _wrap_envelope(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        flat = handler(self)
        envelope = {key: flat.pop(key) for key in self._envelope_keys if key in flat}
        envelope["data"] = flat
        return envelope


class Page(WaniKaniModel):
    """Position in a collection's pagination."""

    per_page: int
    next_url: str | None = None
    previous_url: str | None = None

    @property
    def next(self) -> PageCursor | None:
        return PageCursor.from_url(self.next_url)

    @property
    def previous(self) -> PageCursor | None:
        return PageCursor.from_url(self.previous_url)


M = TypeVar("M")


class ModelCollection(WaniKaniModel, Generic[M]):
    """A paged collection of resources.

    Iterating a collection yields its resources, not field/value pairs.
    """

    object: Literal["collection"] = "collection"
    url: str
    data_updated_at: Timestamp | None = None
    total_count: int
    pages: Page
    data: list[M]

    def __iter__(self) -> Iterator[M]:  # type: ignore[override]
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> M:
        return self.data[index]
