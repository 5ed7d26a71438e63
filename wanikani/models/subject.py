"""Subject data models.

A subject is one of three kinds (radical, kanji, vocabulary) with
overlapping but distinct fields. ``Subject`` is a tagged union: the
``object`` field of the payload is read first and selects which variant's
schema is used to decode the rest.

Mnemonics and hints may contain WaniKani markup such as ``<radical>``,
``<kanji>``, ``<vocabulary>``, ``<meaning>`` and ``<reading>``; it is
returned verbatim.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, model_validator

from ..core.enums import SubjectKind
from .base import ResourceModel, Timestamp, WaniKaniModel


class Meaning(WaniKaniModel):
    meaning: str
    primary: bool
    accepted_answer: bool


class AuxiliaryMeaningKind(str, Enum):
    """Whether an auxiliary meaning is accepted or explicitly rejected."""

    ALLOWLIST = "whitelist"
    BLOCKLIST = "blacklist"


class AuxiliaryMeaning(WaniKaniModel):
    meaning: str
    type: AuxiliaryMeaningKind


class SVGMetadata(WaniKaniModel):
    inline_styles: bool


class PNGMetadata(WaniKaniModel):
    color: str
    dimensions: str
    style_name: str


_IMAGE_METADATA: dict[str, type[WaniKaniModel]] = {
    "image/svg+xml": SVGMetadata,
    "image/png": PNGMetadata,
}


class CharacterImage(WaniKaniModel):
    """Image of a radical without unicode characters.

    The shape of ``metadata`` is selected by ``content_type``.
    """

    url: str
    content_type: str
    metadata: SVGMetadata | PNGMetadata

    @model_validator(mode="before")
    @classmethod
    def _metadata_by_content_type(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        content_type = value.get("content_type")
        metadata_type = _IMAGE_METADATA.get(content_type)
        if metadata_type is None:
            raise ValueError(f"Invalid content-type for character image {content_type!r}")
        metadata = value.get("metadata")
        if isinstance(metadata, dict):
            value = {**value, "metadata": metadata_type.model_validate(metadata)}
        return value


class ReadingKind(str, Enum):
    KUNYOMI = "kunyomi"
    NANORI = "nanori"
    ONYOMI = "onyomi"


class KanjiReading(WaniKaniModel):
    reading: str
    primary: bool
    accepted_answer: bool
    type: ReadingKind


class VocabularyReading(WaniKaniModel):
    reading: str
    primary: bool
    accepted_answer: bool


class ContextSentence(WaniKaniModel):
    en: str
    ja: str


class PronunciationAudioMetadata(WaniKaniModel):
    gender: str
    source_id: int
    pronunciation: str
    voice_actor_id: int
    voice_actor_name: str
    voice_description: str


class PronunciationAudio(WaniKaniModel):
    url: str
    content_type: str
    metadata: PronunciationAudioMetadata


class SubjectBase(ResourceModel):
    """Fields shared by every kind of subject."""

    id: int

    auxiliary_meanings: list[AuxiliaryMeaning] = Field(default_factory=list)
    created_at: Timestamp
    document_url: str
    hidden_at: Timestamp | None = None
    lesson_position: int
    level: int
    meaning_mnemonic: str
    meanings: list[Meaning]
    slug: str
    spaced_repetition_system_id: int

    @property
    def kind(self) -> SubjectKind:
        return SubjectKind(self.object)

    @property
    def primary_meaning(self) -> str | None:
        return next((m.meaning for m in self.meanings if m.primary), None)


class Radical(SubjectBase):
    object: Literal["radical"] = "radical"

    amalgamation_subject_ids: list[int] = Field(default_factory=list)
    characters: str | None = None
    character_images: list[CharacterImage] = Field(default_factory=list)


class Kanji(SubjectBase):
    object: Literal["kanji"] = "kanji"

    amalgamation_subject_ids: list[int] = Field(default_factory=list)
    characters: str
    component_subject_ids: list[int] = Field(default_factory=list)
    meaning_hint: str | None = None
    reading_hint: str | None = None
    reading_mnemonic: str
    readings: list[KanjiReading]
    visually_similar_subject_ids: list[int] = Field(default_factory=list)


class Vocabulary(SubjectBase):
    object: Literal["vocabulary"] = "vocabulary"

    characters: str
    component_subject_ids: list[int] = Field(default_factory=list)
    context_sentences: list[ContextSentence] = Field(default_factory=list)
    parts_of_speech: list[str] = Field(default_factory=list)
    pronunciation_audios: list[PronunciationAudio] = Field(default_factory=list)
    reading_mnemonic: str
    readings: list[VocabularyReading]


Subject = Annotated[Union[Radical, Kanji, Vocabulary], Discriminator("object")]
