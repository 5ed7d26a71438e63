"""Review statistic data model."""

from typing import Literal

from ..core.enums import SubjectKind
from .base import ResourceModel, Timestamp


class ReviewStatistic(ResourceModel):
    """Aggregate answer statistics for one subject."""

    object: Literal["review_statistic"] = "review_statistic"
    id: int

    created_at: Timestamp
    hidden: bool
    meaning_correct: int
    meaning_current_streak: int
    meaning_incorrect: int
    meaning_max_streak: int
    percentage_correct: int
    reading_correct: int
    reading_current_streak: int
    reading_incorrect: int
    reading_max_streak: int
    subject_id: int
    subject_type: SubjectKind
