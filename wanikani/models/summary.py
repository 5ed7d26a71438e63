"""Summary (report) data model."""

from typing import Literal

from .base import ResourceModel, Timestamp, WaniKaniModel


class SummaryLesson(WaniKaniModel):
    """Subjects available for lessons at a point in time."""

    available_at: Timestamp
    subject_ids: list[int]


class SummaryReview(WaniKaniModel):
    """Subjects available for review at a point in time."""

    available_at: Timestamp
    subject_ids: list[int]


class Summary(ResourceModel):
    """Currently available lessons and reviews, plus the upcoming review schedule.

    The report has no identifier of its own.
    """

    object: Literal["report"] = "report"
    id: int | None = None

    lessons: list[SummaryLesson]
    next_reviews_at: Timestamp | None = None
    reviews: list[SummaryReview]
