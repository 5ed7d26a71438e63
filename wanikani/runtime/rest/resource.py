"""Resource descriptors.

A resource descriptor is a declarative, side-effect free description of one
API operation: the path relative to the versioned base URL, an optional
request body, a cache hint and a hook that mutates the built request (query
filters, HTTP method). Constructing a descriptor never performs I/O.

Architecture:
    ``Resource`` is a structural protocol, so any object exposing the four
    members can be sent. ``BaseResource`` supplies the defaults shared by the
    concrete descriptors in ``wanikani.resources``: a GET without a body, the
    protocol cache policy and a no-op request hook.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from ...core.enums import CachePolicy

if TYPE_CHECKING:
    from .request import HTTPRequest


@runtime_checkable
class Resource(Protocol):
    """Structural interface of a resource descriptor."""

    content: ClassVar[Any]

    @property
    def path(self) -> str: ...

    @property
    def body(self) -> Any: ...

    @property
    def cache_policy(self) -> CachePolicy: ...

    def mutate_request(self, request: HTTPRequest) -> None: ...


@dataclass(frozen=True)
class BaseResource:
    """Defaults for resource descriptors.

    Subclasses set ``content`` to the type the response decodes into and
    either a constant ``path`` or a ``path`` property.
    """

    content: ClassVar[Any] = None

    path = ""
    body = None
    cache_policy = CachePolicy.USE_PROTOCOL_CACHE_POLICY

    def mutate_request(self, request: HTTPRequest) -> None:
        """Adjust the request after the fixed headers were applied."""
        return None


def add_filters(request: HTTPRequest, filters: Iterable[tuple[str, Any]]) -> None:
    """Append every set filter as a query item, in order."""
    for key, value in filters:
        request.add_query(key, value)


def freeze(values: Iterable[Any] | None) -> tuple[Any, ...] | None:
    """Snapshot a filter collection so descriptors stay immutable."""
    return tuple(values) if values is not None else None
