"""Reset data model."""

from typing import Literal

from .base import ResourceModel, Timestamp


class Reset(ResourceModel):
    """A user-initiated reset of progress back to a target level."""

    object: Literal["reset"] = "reset"
    id: int

    confirmed_at: Timestamp | None = None
    created_at: Timestamp
    original_level: int
    target_level: int
