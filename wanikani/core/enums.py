"""Core enumerations shared by the request pipeline and the models.

Architecture:
    This module defines the closed value sets the library relies on. They are
    string or integer enums so they serialize to the exact wire values without
    any custom encoding.

Key Types:
    - StatusCode: HTTP status codes the API is documented to return
    - CachePolicy: Cache hint carried by a resource descriptor
    - SubjectKind: Discriminant of the subject tagged union
"""

from enum import Enum, IntEnum


class StatusCode(IntEnum):
    """HTTP status codes returned by the WaniKani API.

    Any status outside this set is treated as an incompatible response.
    """

    OK = 200
    NOT_MODIFIED = 304
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @property
    def is_success(self) -> bool:
        """Whether the status code is known to be successful."""
        return self in (StatusCode.OK, StatusCode.NOT_MODIFIED)

    @classmethod
    def from_status(cls, status: int) -> "StatusCode | None":
        """Return the matching member, or None for an unknown status."""
        try:
            return cls(status)
        except ValueError:
            return None


class CachePolicy(str, Enum):
    """How aggressively a response may be served from a local cache.

    The library itself does not cache. The policy travels with the request so
    a caching transport can honour it.
    """

    USE_PROTOCOL_CACHE_POLICY = "use_protocol_cache_policy"
    RETURN_CACHE_DATA_ELSE_LOAD = "return_cache_data_else_load"


class SubjectKind(str, Enum):
    """The three kinds of subject."""

    RADICAL = "radical"
    KANJI = "kanji"
    VOCABULARY = "vocabulary"
