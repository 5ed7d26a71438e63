"""Spaced repetition system endpoints.

Available spaced repetition systems used for calculating `srs_stage` changes
to assignments. Each subject references the system it is reviewed under.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...models import ModelCollection, SpacedRepetitionSystem
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListSpacedRepetitionSystems(BaseResource):
    content = ModelCollection[SpacedRepetitionSystem]
    path = "spaced_repetition_systems"

    ids: tuple[int, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(request, [("ids", self.ids), ("updated_after", self.updated_after)])


@dataclass(frozen=True)
class GetSpacedRepetitionSystem(BaseResource):
    content = SpacedRepetitionSystem

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"spaced_repetition_systems/{self.id}"


def spaced_repetition_systems(
    *,
    ids: Iterable[int] | None = None,
    updated_after: datetime | None = None,
) -> ListSpacedRepetitionSystems:
    return ListSpacedRepetitionSystems(ids=freeze(ids), updated_after=updated_after)


def spaced_repetition_system(id: int) -> GetSpacedRepetitionSystem:
    return GetSpacedRepetitionSystem(id=id)
