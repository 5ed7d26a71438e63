"""Resource descriptors and factory functions for every API operation.

Each operation is a frozen dataclass descriptor (``ListAssignments``,
``CreateReview``, ...) with a snake_case factory function. Descriptors are
plain values: build one and hand it to ``WaniKani.send`` or
``WaniKani.paginate``.

Example:
    >>> async with WaniKani(token="...") as client:
    ...     async for page in client.paginate(resources.subjects(levels=[1, 2])):
    ...         for subject in page.data:
    ...             print(subject.slug)
"""

from .body import RequestBody
from .endpoints.assignments import (
    GetAssignment,
    ListAssignments,
    StartAssignment,
    StartAssignmentBody,
    assignment,
    assignments,
    start_assignment,
)
from .endpoints.level_progressions import (
    GetLevelProgression,
    ListLevelProgressions,
    level_progression,
    level_progressions,
)
from .endpoints.resets import GetReset, ListResets, reset, resets
from .endpoints.review_statistics import (
    GetReviewStatistic,
    ListReviewStatistics,
    review_statistic,
    review_statistics,
)
from .endpoints.reviews import (
    CreateReview,
    CreateReviewBody,
    GetReview,
    ListReviews,
    create_review,
    review,
    reviews,
)
from .endpoints.spaced_repetition_systems import (
    GetSpacedRepetitionSystem,
    ListSpacedRepetitionSystems,
    spaced_repetition_system,
    spaced_repetition_systems,
)
from .endpoints.study_materials import (
    CreateStudyMaterial,
    CreateStudyMaterialBody,
    GetStudyMaterial,
    ListStudyMaterials,
    UpdateStudyMaterial,
    UpdateStudyMaterialBody,
    create_study_material,
    study_material,
    study_materials,
    update_study_material,
)
from .endpoints.subjects import GetSubject, ListSubjects, subject, subjects
from .endpoints.summary import GetSummary, summary
from .endpoints.users import GetUser, UpdateUser, UpdateUserBody, update_user, user
from .endpoints.voice_actors import GetVoiceActor, ListVoiceActors, voice_actor, voice_actors

__all__ = [
    "RequestBody",
    # Assignments
    "ListAssignments",
    "GetAssignment",
    "StartAssignment",
    "StartAssignmentBody",
    "assignments",
    "assignment",
    "start_assignment",
    # Level progressions
    "ListLevelProgressions",
    "GetLevelProgression",
    "level_progressions",
    "level_progression",
    # Resets
    "ListResets",
    "GetReset",
    "resets",
    "reset",
    # Reviews
    "ListReviews",
    "GetReview",
    "CreateReview",
    "CreateReviewBody",
    "reviews",
    "review",
    "create_review",
    # Review statistics
    "ListReviewStatistics",
    "GetReviewStatistic",
    "review_statistics",
    "review_statistic",
    # Spaced repetition systems
    "ListSpacedRepetitionSystems",
    "GetSpacedRepetitionSystem",
    "spaced_repetition_systems",
    "spaced_repetition_system",
    # Study materials
    "ListStudyMaterials",
    "GetStudyMaterial",
    "CreateStudyMaterial",
    "CreateStudyMaterialBody",
    "UpdateStudyMaterial",
    "UpdateStudyMaterialBody",
    "study_materials",
    "study_material",
    "create_study_material",
    "update_study_material",
    # Subjects
    "ListSubjects",
    "GetSubject",
    "subjects",
    "subject",
    # Summary
    "GetSummary",
    "summary",
    # User
    "GetUser",
    "UpdateUser",
    "UpdateUserBody",
    "user",
    "update_user",
    # Voice actors
    "ListVoiceActors",
    "GetVoiceActor",
    "voice_actors",
    "voice_actor",
]
