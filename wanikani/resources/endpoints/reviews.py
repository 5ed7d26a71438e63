"""Review endpoints.

Reviews log all the correct and incorrect answers provided through the
'Reviews' section of WaniKani. Review records are created when a user answers
all the parts of a subject correctly once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from pydantic import Field, model_validator

from ...models import ModelCollection, Review
from ...models.base import Timestamp
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze
from ..body import RequestBody


@dataclass(frozen=True)
class ListReviews(BaseResource):
    """All reviews, ordered by ascending creation date, 1000 at a time."""

    content = ModelCollection[Review]
    path = "reviews"

    assignment_ids: tuple[int, ...] | None = None
    ids: tuple[int, ...] | None = None
    subject_ids: tuple[int, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(
            request,
            [
                ("assignment_ids", self.assignment_ids),
                ("ids", self.ids),
                ("subject_ids", self.subject_ids),
                ("updated_after", self.updated_after),
            ],
        )


@dataclass(frozen=True)
class GetReview(BaseResource):
    content = Review

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"reviews/{self.id}"


class CreateReviewBody(RequestBody):
    """A completed review.

    Either ``assignment_id`` or ``subject_id`` identifies the reviewed item.
    Subjects of type radical are not quizzed on readings, so
    ``incorrect_reading_answers`` stays 0 for them.
    """

    _wrapper_keys: ClassVar[tuple[str, ...]] = ("review",)

    assignment_id: int | None = None
    subject_id: int | None = None
    incorrect_meaning_answers: int = Field(default=0, ge=0)
    incorrect_reading_answers: int = Field(default=0, ge=0)
    created_at: Timestamp | None = None

    @model_validator(mode="after")
    def _require_target(self) -> CreateReviewBody:
        if self.assignment_id is None and self.subject_id is None:
            raise ValueError("either assignment_id or subject_id must be set")
        return self


@dataclass(frozen=True)
class CreateReview(BaseResource):
    """Create a review for an assignment.

    The assignment must be available, i.e. its ``available_at`` is set and in
    the past. The server also updates the related assignment and review
    statistic.
    """

    content = Review
    path = "reviews"

    body: CreateReviewBody

    def mutate_request(self, request: HTTPRequest) -> None:
        request.method = "POST"


def reviews(
    *,
    assignment_ids: Iterable[int] | None = None,
    ids: Iterable[int] | None = None,
    subject_ids: Iterable[int] | None = None,
    updated_after: datetime | None = None,
) -> ListReviews:
    return ListReviews(
        assignment_ids=freeze(assignment_ids),
        ids=freeze(ids),
        subject_ids=freeze(subject_ids),
        updated_after=updated_after,
    )


def review(id: int) -> GetReview:
    return GetReview(id=id)


def create_review(
    *,
    assignment_id: int | None = None,
    subject_id: int | None = None,
    incorrect_meaning_answers: int = 0,
    incorrect_reading_answers: int = 0,
    created_at: datetime | None = None,
) -> CreateReview:
    """Build a review creation request.

    Raises:
        pydantic.ValidationError: If neither target id is given or a count is negative
    """
    return CreateReview(
        body=CreateReviewBody(
            assignment_id=assignment_id,
            subject_id=subject_id,
            incorrect_meaning_answers=incorrect_meaning_answers,
            incorrect_reading_answers=incorrect_reading_answers,
            created_at=created_at,
        )
    )
