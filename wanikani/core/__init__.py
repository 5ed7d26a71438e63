"""Core components."""

from .config import (
    APPLICATION_JSON,
    BASE_URL,
    DEFAULT_USER_AGENT,
    REVISION_HEADER,
    APIVersion,
    Configuration,
)
from .enums import CachePolicy, StatusCode, SubjectKind
from .exceptions import (
    APIError,
    DecodeError,
    EncodeError,
    IncompatibleResponseError,
    RateLimitError,
    StatusCodeError,
    WaniKaniError,
)
from .formatters import DEFAULT_FORMATTER, ISO8601Formatter

__all__ = [
    "APIVersion",
    "Configuration",
    "APPLICATION_JSON",
    "BASE_URL",
    "DEFAULT_USER_AGENT",
    "REVISION_HEADER",
    "CachePolicy",
    "StatusCode",
    "SubjectKind",
    "WaniKaniError",
    "EncodeError",
    "DecodeError",
    "IncompatibleResponseError",
    "RateLimitError",
    "StatusCodeError",
    "APIError",
    "ISO8601Formatter",
    "DEFAULT_FORMATTER",
]
