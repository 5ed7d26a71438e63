"""Client configuration and API versioning.

This module centralizes the base URL, header names and the supported API
versions so the request builder can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from ..runtime.rest.request import HTTPRequest

BASE_URL = "https://api.wanikani.com"
DEFAULT_USER_AGENT = "wanikani-python"
APPLICATION_JSON = "application/json; charset=utf-8"
REVISION_HEADER = "Wanikani-Revision"


@dataclass(frozen=True)
class APIVersion:
    """A supported version of the WaniKani API.

    Attributes:
        version: Path segment of the version (e.g. "v2")
        revision: Value sent in the ``Wanikani-Revision`` header
        base_url: Scheme and host of the API
    """

    version: str
    revision: str
    base_url: str = BASE_URL

    V2: ClassVar[APIVersion]

    @property
    def versioned_base(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.version}"

    def url_for(self, path: str) -> str:
        """Resolve a resource path against the versioned base URL.

        An empty path targets the versioned base itself, with no trailing
        segment.
        """
        path = path.strip("/")
        if not path:
            return self.versioned_base
        return f"{self.versioned_base}/{path}"


# API version 2, revision 20170710.
APIVersion.V2 = APIVersion(version="v2", revision="20170710")


@dataclass
class Configuration:
    """Settings applied to every request a client sends.

    Everything except ``token`` is expected to stay fixed for the lifetime of
    a client. Rotating the token while other tasks are sending requests must
    be synchronized by the caller.
    """

    version: APIVersion = field(default_factory=lambda: APIVersion.V2)
    user_agent: str = DEFAULT_USER_AGENT
    token: str | None = None

    @classmethod
    def default(cls) -> Configuration:
        return cls()

    def apply_headers(self, request: HTTPRequest) -> None:
        """Set the fixed headers required on every request."""
        request.headers["User-Agent"] = self.user_agent
        request.headers["Accept"] = APPLICATION_JSON
        request.headers[REVISION_HEADER] = self.version.revision
        if self.token is not None:
            request.headers["Authorization"] = f"Bearer {self.token}"
