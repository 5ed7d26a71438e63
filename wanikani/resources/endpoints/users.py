"""User endpoints.

The user endpoint returns basic information for the owner of the API token.
Only the preferences can be changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...models import PresentationOrder, User
from ...runtime.rest.request import HTTPRequest
from ...runtime.rest.resource import BaseResource
from ..body import RequestBody


@dataclass(frozen=True)
class GetUser(BaseResource):
    content = User
    path = "user"


class UpdateUserBody(RequestBody):
    """Preference changes; fields left as None are not changed."""

    _wrapper_keys: ClassVar[tuple[str, ...]] = ("user", "preferences")

    default_voice_actor_id: int | None = None
    lessons_autoplay_audio: bool | None = None
    lessons_batch_size: int | None = None
    lessons_presentation_order: PresentationOrder | None = None
    reviews_autoplay_audio: bool | None = None
    reviews_display_srs_indicator: bool | None = None


@dataclass(frozen=True)
class UpdateUser(BaseResource):
    content = User
    path = "user"

    body: UpdateUserBody

    def mutate_request(self, request: HTTPRequest) -> None:
        request.method = "PUT"


def user() -> GetUser:
    return GetUser()


def update_user(
    *,
    default_voice_actor_id: int | None = None,
    lessons_autoplay_audio: bool | None = None,
    lessons_batch_size: int | None = None,
    lessons_presentation_order: PresentationOrder | None = None,
    reviews_autoplay_audio: bool | None = None,
    reviews_display_srs_indicator: bool | None = None,
) -> UpdateUser:
    return UpdateUser(
        body=UpdateUserBody(
            default_voice_actor_id=default_voice_actor_id,
            lessons_autoplay_audio=lessons_autoplay_audio,
            lessons_batch_size=lessons_batch_size,
            lessons_presentation_order=lessons_presentation_order,
            reviews_autoplay_audio=reviews_autoplay_audio,
            reviews_display_srs_indicator=reviews_display_srs_indicator,
        )
    )
