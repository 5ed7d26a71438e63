"""Assignment data model."""

from typing import Literal

from ..core.enums import SubjectKind
from .base import ResourceModel, Timestamp


class Assignment(ResourceModel):
    """A user's progress on a particular subject.

    Assignments are created when a user has passed all the components of the
    subject and the subject is at or below their current level for the first
    time. ``unlocked_at``, ``started_at``, ``passed_at`` and ``burned_at`` are
    always in that order.
    """

    object: Literal["assignment"] = "assignment"
    id: int

    available_at: Timestamp | None = None
    burned_at: Timestamp | None = None
    created_at: Timestamp
    hidden: bool
    level: int | None = None
    passed_at: Timestamp | None = None
    resurrected_at: Timestamp | None = None
    srs_stage: int
    started_at: Timestamp | None = None
    subject_id: int
    subject_type: SubjectKind
    unlocked_at: Timestamp | None = None
