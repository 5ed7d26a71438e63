"""Assignment endpoints.

Assignments contain information about a user's progress on a particular
subject, including their current state and timestamps for various progress
milestones.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from ...core.enums import SubjectKind
from ...models import Assignment, ModelCollection
from ...models.base import Timestamp
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze
from ..body import RequestBody


@dataclass(frozen=True)
class ListAssignments(BaseResource):
    """All assignments, ordered by ascending creation date, 500 at a time."""

    content = ModelCollection[Assignment]
    path = "assignments"

    available_after: datetime | None = None
    available_before: datetime | None = None
    burned: bool | None = None
    hidden: bool | None = None
    unlocked: bool | None = None
    ids: tuple[int, ...] | None = None
    immediately_available_for_lessons: bool | None = None
    immediately_available_for_review: bool | None = None
    in_review: bool | None = None
    levels: tuple[int, ...] | None = None
    srs_stages: tuple[int, ...] | None = None
    started: bool | None = None
    subject_ids: tuple[int, ...] | None = None
    subject_types: tuple[SubjectKind, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(
            request,
            [
                ("available_after", self.available_after),
                ("available_before", self.available_before),
                ("burned", self.burned),
                ("hidden", self.hidden),
                ("unlocked", self.unlocked),
                ("ids", self.ids),
                ("immediately_available_for_lessons", self.immediately_available_for_lessons),
                ("immediately_available_for_review", self.immediately_available_for_review),
                ("in_review", self.in_review),
                ("levels", self.levels),
                ("srs_stages", self.srs_stages),
                ("started", self.started),
                ("subject_ids", self.subject_ids),
                ("subject_types", self.subject_types),
                ("updated_after", self.updated_after),
            ],
        )


@dataclass(frozen=True)
class GetAssignment(BaseResource):
    content = Assignment

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"assignments/{self.id}"


class StartAssignmentBody(RequestBody):
    """Body of a start request; ``started_at`` defaults to now on the server."""

    started_at: Timestamp | None = None


@dataclass(frozen=True)
class StartAssignment(BaseResource):
    """Mark an assignment as started, moving it from lessons to reviews.

    The assignment must have been unlocked and not yet started.
    """

    content = Assignment

    id: int
    body: StartAssignmentBody = field(default_factory=StartAssignmentBody)

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"assignments/{self.id}/start"

    def mutate_request(self, request: HTTPRequest) -> None:
        request.method = "PUT"


def assignments(
    *,
    available_after: datetime | None = None,
    available_before: datetime | None = None,
    burned: bool | None = None,
    hidden: bool | None = None,
    unlocked: bool | None = None,
    ids: Iterable[int] | None = None,
    immediately_available_for_lessons: bool | None = None,
    immediately_available_for_review: bool | None = None,
    in_review: bool | None = None,
    levels: Iterable[int] | None = None,
    srs_stages: Iterable[int] | None = None,
    started: bool | None = None,
    subject_ids: Iterable[int] | None = None,
    subject_types: Iterable[SubjectKind] | None = None,
    updated_after: datetime | None = None,
) -> ListAssignments:
    return ListAssignments(
        available_after=available_after,
        available_before=available_before,
        burned=burned,
        hidden=hidden,
        unlocked=unlocked,
        ids=freeze(ids),
        immediately_available_for_lessons=immediately_available_for_lessons,
        immediately_available_for_review=immediately_available_for_review,
        in_review=in_review,
        levels=freeze(levels),
        srs_stages=freeze(srs_stages),
        started=started,
        subject_ids=freeze(subject_ids),
        subject_types=freeze(subject_types),
        updated_after=updated_after,
    )


def assignment(id: int) -> GetAssignment:
    return GetAssignment(id=id)


def start_assignment(id: int, started_at: datetime | None = None) -> StartAssignment:
    return StartAssignment(id=id, body=StartAssignmentBody(started_at=started_at))
