"""Review data model."""

from typing import Literal

from .base import ResourceModel, Timestamp


class Review(ResourceModel):
    """A single completed review of an assignment."""

    object: Literal["review"] = "review"
    id: int

    assignment_id: int
    created_at: Timestamp
    ending_srs_stage: int
    incorrect_meaning_answers: int
    incorrect_reading_answers: int
    spaced_repetition_system_id: int
    starting_srs_stage: int
    subject_id: int
