"""Voice actor endpoints.

Available voice actors used for vocabulary reading pronunciation audio.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...models import ModelCollection, VoiceActor
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListVoiceActors(BaseResource):
    """All voice actors, ordered by ascending creation date, 500 at a time."""

    content = ModelCollection[VoiceActor]
    path = "voice_actors"

    ids: tuple[int, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(request, [("ids", self.ids), ("updated_after", self.updated_after)])


@dataclass(frozen=True)
class GetVoiceActor(BaseResource):
    content = VoiceActor

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"voice_actors/{self.id}"


def voice_actors(
    *,
    ids: Iterable[int] | None = None,
    updated_after: datetime | None = None,
) -> ListVoiceActors:
    return ListVoiceActors(ids=freeze(ids), updated_after=updated_after)


def voice_actor(id: int) -> GetVoiceActor:
    return GetVoiceActor(id=id)
