"""Review statistic endpoints.

Review statistics summarize the activity recorded in reviews. They contain
the number of correct and incorrect answers for both meaning and reading,
along with the current and maximum streaks.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import SubjectKind
from ...models import ModelCollection, ReviewStatistic
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze


@dataclass(frozen=True)
class ListReviewStatistics(BaseResource):
    """All review statistics, ordered by ascending creation date, 500 at a time."""

    content = ModelCollection[ReviewStatistic]
    path = "review_statistics"

    hidden: bool | None = None
    ids: tuple[int, ...] | None = None
    percentages_greater_than: int | None = None
    percentages_less_than: int | None = None
    subject_ids: tuple[int, ...] | None = None
    subject_types: tuple[SubjectKind, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(
            request,
            [
                ("hidden", self.hidden),
                ("ids", self.ids),
                ("percentages_greater_than", self.percentages_greater_than),
                ("percentages_less_than", self.percentages_less_than),
                ("subject_ids", self.subject_ids),
                ("subject_types", self.subject_types),
                ("updated_after", self.updated_after),
            ],
        )


@dataclass(frozen=True)
class GetReviewStatistic(BaseResource):
    content = ReviewStatistic

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"review_statistics/{self.id}"


def review_statistics(
    *,
    hidden: bool | None = None,
    ids: Iterable[int] | None = None,
    percentages_greater_than: int | None = None,
    percentages_less_than: int | None = None,
    subject_ids: Iterable[int] | None = None,
    subject_types: Iterable[SubjectKind] | None = None,
    updated_after: datetime | None = None,
) -> ListReviewStatistics:
    return ListReviewStatistics(
        hidden=hidden,
        ids=freeze(ids),
        percentages_greater_than=percentages_greater_than,
        percentages_less_than=percentages_less_than,
        subject_ids=freeze(subject_ids),
        subject_types=freeze(subject_types),
        updated_after=updated_after,
    )


def review_statistic(id: int) -> GetReviewStatistic:
    return GetReviewStatistic(id=id)
