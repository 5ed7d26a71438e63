"""Study material endpoints.

Study materials store user-specific notes and synonyms for a given subject.
The records are created as soon as the user enters any study information.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ...core.enums import SubjectKind
from ...models import ModelCollection, StudyMaterial
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource, add_filters, freeze
from ..body import RequestBody


@dataclass(frozen=True)
class ListStudyMaterials(BaseResource):
    """All study materials, ordered by ascending creation date, 500 at a time."""

    content = ModelCollection[StudyMaterial]
    path = "study_materials"

    hidden: bool | None = None
    ids: tuple[int, ...] | None = None
    subject_ids: tuple[int, ...] | None = None
    subject_types: tuple[SubjectKind, ...] | None = None
    updated_after: datetime | None = None

    def mutate_request(self, request: HTTPRequest) -> None:
        add_filters(
            request,
            [
                ("hidden", self.hidden),
                ("ids", self.ids),
                ("subject_ids", self.subject_ids),
                ("subject_types", self.subject_types),
                ("updated_after", self.updated_after),
            ],
        )


@dataclass(frozen=True)
class GetStudyMaterial(BaseResource):
    content = StudyMaterial

    id: int

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"study_materials/{self.id}"


class UpdateStudyMaterialBody(RequestBody):
    _wrapper_keys: ClassVar[tuple[str, ...]] = ("study_material",)

    meaning_note: str | None = None
    reading_note: str | None = None
    meaning_synonyms: list[str] | None = None


class CreateStudyMaterialBody(UpdateStudyMaterialBody):
    subject_id: int


@dataclass(frozen=True)
class CreateStudyMaterial(BaseResource):
    """Create study material for a subject.

    Only one study material may exist per subject for the token's owner.
    """

    content = StudyMaterial
    path = "study_materials"

    body: CreateStudyMaterialBody

    def mutate_request(self, request: HTTPRequest) -> None:
        request.method = "POST"


@dataclass(frozen=True)
class UpdateStudyMaterial(BaseResource):
    """Update the notes and synonyms of existing study material."""

    content = StudyMaterial

    id: int
    body: UpdateStudyMaterialBody

    @property
    def path(self) -> str:  # type: ignore[override]
        return f"study_materials/{self.id}"

    def mutate_request(self, request: HTTPRequest) -> None:
        request.method = "PUT"


def study_materials(
    *,
    hidden: bool | None = None,
    ids: Iterable[int] | None = None,
    subject_ids: Iterable[int] | None = None,
    subject_types: Iterable[SubjectKind] | None = None,
    updated_after: datetime | None = None,
) -> ListStudyMaterials:
    return ListStudyMaterials(
        hidden=hidden,
        ids=freeze(ids),
        subject_ids=freeze(subject_ids),
        subject_types=freeze(subject_types),
        updated_after=updated_after,
    )


def study_material(id: int) -> GetStudyMaterial:
    return GetStudyMaterial(id=id)


def create_study_material(
    subject_id: int,
    *,
    meaning_note: str | None = None,
    reading_note: str | None = None,
    meaning_synonyms: Iterable[str] | None = None,
) -> CreateStudyMaterial:
    return CreateStudyMaterial(
        body=CreateStudyMaterialBody(
            subject_id=subject_id,
            meaning_note=meaning_note,
            reading_note=reading_note,
            meaning_synonyms=list(meaning_synonyms) if meaning_synonyms is not None else None,
        )
    )


def update_study_material(
    id: int,
    *,
    meaning_note: str | None = None,
    reading_note: str | None = None,
    meaning_synonyms: Iterable[str] | None = None,
) -> UpdateStudyMaterial:
    """Build a study material update; fields left as None are not changed."""
    return UpdateStudyMaterial(
        id=id,
        body=UpdateStudyMaterialBody(
            meaning_note=meaning_note,
            reading_note=reading_note,
            meaning_synonyms=list(meaning_synonyms) if meaning_synonyms is not None else None,
        ),
    )
