"""Shared fixtures: a replaying transport and canned API payloads."""

from __future__ import annotations

import json
from typing import Any

import pytest

from wanikani.runtime.rest.request import HTTPRequest
from wanikani.runtime.rest.transport import RawResponse


class MockTransport:
    """Replays a scripted queue of responses and records every request.

    A queued exception is raised instead of returned, standing in for a
    transport failure.
    """

    def __init__(self, responses: list[RawResponse | BaseException] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[HTTPRequest] = []
        self.closed = False

    def queue(self, *responses: RawResponse | BaseException) -> None:
        self.responses.extend(responses)

    async def send(self, request: HTTPRequest) -> RawResponse:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"No scripted response for {request.method} {request.full_url}")
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True


def json_response(
    payload: Any, status: int = 200, headers: dict[str, str] | None = None
) -> RawResponse:
    return RawResponse(
        status=status,
        headers={"Content-Type": "application/json; charset=utf-8", **(headers or {})},
        body=json.dumps(payload).encode(),
    )


def rate_limited_response(reset: int = 1700000000) -> RawResponse:
    return RawResponse(
        status=429,
        headers={
            "Ratelimit-Limit": "60",
            "Ratelimit-Remaining": "0",
            "Ratelimit-Reset": str(reset),
        },
        body=b'{"code": 429, "error": "Rate limit exceeded"}',
    )


def assignment_payload(id: int = 80463006, **data: Any) -> dict[str, Any]:
    return {
        "id": id,
        "object": "assignment",
        "url": f"https://api.wanikani.com/v2/assignments/{id}",
        "data_updated_at": "2017-10-30T01:51:10.438432Z",
        "data": {
            "created_at": "2017-09-05T23:38:10.695133Z",
            "subject_id": 8761,
            "subject_type": "radical",
            "srs_stage": 8,
            "unlocked_at": "2017-09-05T23:38:10.695133Z",
            "started_at": "2017-09-05T23:41:28.980679Z",
            "passed_at": "2017-09-07T17:14:14.491889Z",
            "burned_at": None,
            "available_at": "2018-02-27T00:00:00.000000Z",
            "resurrected_at": None,
            "hidden": False,
            **data,
        },
    }


def collection_payload(
    items: list[dict[str, Any]],
    *,
    next_after_id: int | None = None,
    resource: str = "assignments",
    total_count: int | None = None,
) -> dict[str, Any]:
    next_url = (
        f"https://api.wanikani.com/v2/{resource}?page_after_id={next_after_id}"
        if next_after_id is not None
        else None
    )
    return {
        "object": "collection",
        "url": f"https://api.wanikani.com/v2/{resource}",
        "pages": {"per_page": 500, "next_url": next_url, "previous_url": None},
        "total_count": total_count if total_count is not None else len(items),
        "data_updated_at": "2017-11-29T19:37:03.571377Z",
        "data": items,
    }


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def payloads():
    """Payload builders, exposed as a fixture so test modules need no imports."""

    class Payloads:
        json_response = staticmethod(json_response)
        rate_limited = staticmethod(rate_limited_response)
        assignment = staticmethod(assignment_payload)
        collection = staticmethod(collection_payload)

    return Payloads
