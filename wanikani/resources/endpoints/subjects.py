"""Subject endpoints.

Subjects are the radicals, kanji and vocabulary that are learned through
lessons and reviews. Subject data changes rarely, so these descriptors ask
for cached data when a transport keeps one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import CachePolicy, SubjectKind
from ...models import ModelCollection, Subject
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListSubjects(BaseResource):
    """All subjects, ordered by ascending creation date, 1000 at a time."""

    content = ModelCollection[Subject]
    path = "subjects"
    cache_policy = CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD

    ids: tuple[int, ...] | None = None
    types: tuple[SubjectKind, ...] | None = None
    slugs: tuple[str, ...] | None = None
    levels: tuple[int, ...] | None = None
    hidden: bool | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(
            request,
            [
                ("ids", self.ids),
                ("types", self.types),
                ("slugs", self.slugs),
                ("levels", self.levels),
                ("hidden", self.hidden),
                ("updated_after", self.updated_after),
            ],
        )


@dataclass(frozen=True)
class GetSubject(BaseResource):
    content = Subject
    cache_policy = CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"subjects/{self.id}"


def subjects(
    *,
    ids: Iterable[int] | None = None,
    types: Iterable[SubjectKind] | None = None,
    slugs: Iterable[str] | None = None,
    levels: Iterable[int] | None = None,
    hidden: bool | None = None,
    updated_after: datetime | None = None,
) -> ListSubjects:
    return ListSubjects(
        ids=freeze(ids),
        types=freeze(types),
        slugs=freeze(slugs),
        levels=freeze(levels),
        hidden=hidden,
        updated_after=updated_after,
    )


def subject(id: int) -> GetSubject:
    return GetSubject(id=id)
