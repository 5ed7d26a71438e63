"""Voice actor data model."""

from typing import Literal

from .base import ResourceModel


class VoiceActor(ResourceModel):
    """A voice actor used for vocabulary pronunciation audio."""

    object: Literal["voice_actor"] = "voice_actor"
    id: int

    description: str
    gender: str
    name: str
