"""Level progression data model."""

from typing import Literal

from .base import ResourceModel, Timestamp


class LevelProgression(ResourceModel):
    """Progress through one level: unlock, start, pass, completion or abandonment."""

    object: Literal["level_progression"] = "level_progression"
    id: int

    abandoned_at: Timestamp | None = None
    completed_at: Timestamp | None = None
    created_at: Timestamp
    level: int
    passed_at: Timestamp | None = None
    started_at: Timestamp | None = None
    unlocked_at: Timestamp | None = None
