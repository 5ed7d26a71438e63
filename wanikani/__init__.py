"""WaniKani - Typed async client for the WaniKani REST API."""

from . import resources
from .client import WaniKani
from .core import (
    BASE_URL,
    DEFAULT_FORMATTER,
    APIError,
    APIVersion,
    CachePolicy,
    Configuration,
    DecodeError,
    EncodeError,
    IncompatibleResponseError,
    ISO8601Formatter,
    RateLimitError,
    StatusCode,
    StatusCodeError,
    SubjectKind,
    WaniKaniError,
)
from .models import (
    Assignment,
    Kanji,
    LevelProgression,
    ModelCollection,
    Page,
    Radical,
    Reset,
    Review,
    ReviewStatistic,
    SpacedRepetitionSystem,
    StudyMaterial,
    Subject,
    Summary,
    User,
    Vocabulary,
    VoiceActor,
)
from .runtime import (
    HTTPRequest,
    PageCursor,
    RawResponse,
    Resource,
    Response,
    RESTTransport,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "WaniKani",
    "resources",
    # Configuration
    "APIVersion",
    "BASE_URL",
    "Configuration",
    "DEFAULT_FORMATTER",
    "ISO8601Formatter",
    # Enums
    "CachePolicy",
    "StatusCode",
    "SubjectKind",
    # Exceptions
    "WaniKaniError",
    "EncodeError",
    "DecodeError",
    "IncompatibleResponseError",
    "RateLimitError",
    "StatusCodeError",
    "APIError",
    # Runtime
    "HTTPRequest",
    "PageCursor",
    "RawResponse",
    "Resource",
    "Response",
    "RESTTransport",
    "Transport",
    # Models
    "Assignment",
    "LevelProgression",
    "ModelCollection",
    "Page",
    "Reset",
    "Review",
    "ReviewStatistic",
    "SpacedRepetitionSystem",
    "StudyMaterial",
    "Subject",
    "Radical",
    "Kanji",
    "Vocabulary",
    "Summary",
    "User",
    "VoiceActor",
]
