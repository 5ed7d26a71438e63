"""Study material data model."""

from typing import Literal

from pydantic import Field

from ..core.enums import SubjectKind
from .base import ResourceModel, Timestamp


class StudyMaterial(ResourceModel):
    """User-specific notes and synonyms for a subject."""

    object: Literal["study_material"] = "study_material"
    id: int

    created_at: Timestamp
    hidden: bool
    meaning_note: str | None = None
    meaning_synonyms: list[str] = Field(default_factory=list)
    reading_note: str | None = None
    subject_id: int
    subject_type: SubjectKind
