"""Level progression endpoints.

Level progressions contain information about a user's progress through the
WaniKani levels.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...models import LevelProgression, ModelCollection
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListLevelProgressions(BaseResource):
    content = ModelCollection[LevelProgression]
    path = "level_progressions"

    ids: tuple[int, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(request, [("ids", self.ids), ("updated_after", self.updated_after)])


@dataclass(frozen=True)
class GetLevelProgression(BaseResource):
    content = LevelProgression

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"level_progressions/{self.id}"


def level_progressions(
    *,
    ids: Iterable[int] | None = None,
    updated_after: datetime | None = None,
) -> ListLevelProgressions:
    return ListLevelProgressions(ids=freeze(ids), updated_after=updated_after)


def level_progression(id: int) -> GetLevelProgression:
    return GetLevelProgression(id=id)
