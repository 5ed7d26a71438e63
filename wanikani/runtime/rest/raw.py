"""Raw HTTP response as handed over by a transport."""

from __future__ import annotations

from dataclasses import dataclass, field

from multidict import CIMultiDict, CIMultiDictProxy


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and body bytes of one HTTP response.

    Header lookups are case-insensitive.
    """

    status: int
    headers: CIMultiDictProxy[str] = field(default_factory=lambda: CIMultiDictProxy(CIMultiDict()))
    body: bytes = b""
    url: str | None = None

    def __post_init__(self) -> None:
        headers = self.headers
        if not isinstance(headers, CIMultiDictProxy):
            object.__setattr__(self, "headers", CIMultiDictProxy(CIMultiDict(headers or {})))
