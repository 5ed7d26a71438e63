"""Spaced repetition system data model."""

from typing import Literal

from .base import ResourceModel, Timestamp, WaniKaniModel


class Stage(WaniKaniModel):
    """One stage of a spaced repetition system.

    The unlocking stage (position 0) and the burning stage have no interval.
    """

    interval: int | None = None
    interval_unit: str | None = None
    position: int


class SpacedRepetitionSystem(ResourceModel):
    """Stages and intervals a subject moves through."""

    object: Literal["spaced_repetition_system"] = "spaced_repetition_system"
    id: int

    burning_stage_position: int
    created_at: Timestamp
    description: str
    name: str
    passing_stage_position: int
    stages: list[Stage]
    starting_stage_position: int
    unlocking_stage_position: int
