"""User data model."""

from enum import Enum
from typing import ClassVar, Literal
from uuid import UUID

from .base import ResourceModel, Timestamp, WaniKaniModel


class PresentationOrder(str, Enum):
    """Order in which lessons are presented."""

    ASCENDING_LEVEL_THEN_SUBJECT = "ascending_level_then_subject"
    SHUFFLED = "shuffled"
    ASCENDING_LEVEL_THEN_SHUFFLED = "ascending_level_then_shuffled"


class SubscriptionKind(str, Enum):
    UNKNOWN = "unknown"
    FREE = "free"
    RECURRING = "recurring"
    LIFETIME = "lifetime"


class Preferences(WaniKaniModel):
    """User settings for lessons and reviews."""

    default_voice_actor_id: int
    lessons_autoplay_audio: bool
    lessons_batch_size: int
    lessons_presentation_order: PresentationOrder
    reviews_autoplay_audio: bool
    reviews_display_srs_indicator: bool


class Subscription(WaniKaniModel):
    """Subscription state of the account."""

    active: bool
    max_level_granted: int
    period_ends_at: Timestamp | None = None
    type: SubscriptionKind


class User(ResourceModel):
    """The user the access token belongs to.

    Unlike other resources the identifier is a UUID inside ``data``.
    """

    _envelope_keys: ClassVar[tuple[str, ...]] = ("object", "url", "data_updated_at")

    object: Literal["user"] = "user"

    current_vacation_started_at: Timestamp | None = None
    id: UUID
    level: int
    preferences: Preferences
    profile_url: str
    started_at: Timestamp
    subscription: Subscription
    username: str
