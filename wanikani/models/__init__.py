"""Data models for WaniKani resources.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True) and use the API's snake_case field
    names, so the wire payload and the Python attributes line up one to one.

Model Categories:
    - Envelope: ResourceModel, ModelCollection, Page
    - Study progress: Assignment, LevelProgression, Reset, Review, ReviewStatistic
    - Content: Subject (Radical | Kanji | Vocabulary), SpacedRepetitionSystem, VoiceActor
    - Account: User, StudyMaterial, Summary
"""

from .assignment import Assignment
from .base import (
    ModelCollection,
    Page,
    ResourceModel,
    Timestamp,
    WaniKaniModel,
    formatter_from_context,
)
from .level_progression import LevelProgression
from .reset import Reset
from .review import Review
from .review_statistic import ReviewStatistic
from .spaced_repetition_system import SpacedRepetitionSystem, Stage
from .study_material import StudyMaterial
from .subject import (
    AuxiliaryMeaning,
    AuxiliaryMeaningKind,
    CharacterImage,
    ContextSentence,
    Kanji,
    KanjiReading,
    Meaning,
    PNGMetadata,
    PronunciationAudio,
    PronunciationAudioMetadata,
    Radical,
    ReadingKind,
    Subject,
    SubjectBase,
    SVGMetadata,
    Vocabulary,
    VocabularyReading,
)
from .summary import Summary, SummaryLesson, SummaryReview
from .user import Preferences, PresentationOrder, Subscription, SubscriptionKind, User
from .voice_actor import VoiceActor

__all__ = [
    "WaniKaniModel",
    "ResourceModel",
    "ModelCollection",
    "Page",
    "Timestamp",
    "formatter_from_context",
    "Assignment",
    "LevelProgression",
    "Reset",
    "Review",
    "ReviewStatistic",
    "SpacedRepetitionSystem",
    "Stage",
    "StudyMaterial",
    "Subject",
    "SubjectBase",
    "Radical",
    "Kanji",
    "Vocabulary",
    "Meaning",
    "AuxiliaryMeaning",
    "AuxiliaryMeaningKind",
    "CharacterImage",
    "SVGMetadata",
    "PNGMetadata",
    "KanjiReading",
    "ReadingKind",
    "VocabularyReading",
    "ContextSentence",
    "PronunciationAudio",
    "PronunciationAudioMetadata",
    "Summary",
    "SummaryLesson",
    "SummaryReview",
    "User",
    "Preferences",
    "PresentationOrder",
    "Subscription",
    "SubscriptionKind",
    "VoiceActor",
]
