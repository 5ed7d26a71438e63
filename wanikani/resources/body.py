"""Request body base.

The API expects most write payloads nested under one or more wrapper keys,
e.g. ``{"review": {...}}`` or ``{"user": {"preferences": {...}}}``. A
``RequestBody`` subclass names those keys in ``_wrapper_keys``; its fields
stay flat on the Python side. Unset (None) fields are left out of the
payload entirely.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import SerializerFunctionWrapHandler, model_serializer, model_validator

from ..models.base import WaniKaniModel


class RequestBody(WaniKaniModel):
    """Base for JSON request bodies."""

    _wrapper_keys: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        inner = value
        for key in cls._wrapper_keys:
            if not isinstance(inner, dict) or key not in inner:
                return value
            inner = inner[key]
        return inner

    @model_serializer(mode="wrap")
    def _wrap(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload: dict[str, Any] = {k: v for k, v in handler(self).items() if v is not None}
        for key in reversed(self._wrapper_keys):
            payload = {key: payload}
        return payload
