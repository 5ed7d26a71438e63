"""Reset endpoints.

Resets record each time a user reset their account to an earlier level.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...models import ModelCollection, Reset
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListResets(BaseResource):
    """All resets, ordered by ascending creation date, 500 at a time."""

    content = ModelCollection[Reset]
    path = "resets"

    ids: tuple[int, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(request, [("ids", self.ids), ("updated_after", self.updated_after)])


@dataclass(frozen=True)
class GetReset(BaseResource):
    """A specific reset by its id."""

    content = Reset

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"resets/{self.id}"


def resets(
    *,
    ids: Iterable[int] | None = None,
    updated_after: datetime | None = None,
) -> ListResets:
    return ListResets(ids=freeze(ids), updated_after=updated_after)


def reset(id: int) -> GetReset:
    return GetReset(id=id)
