"""Summary endpoint.

The summary report contains currently available lessons and reviews and the
reviews that will become available in the next 24 hours, grouped by the hour.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...models import Summary
from ...runtime.rest.resource import BaseResource


@dataclass(frozen=True)
class GetSummary(BaseResource):
    content = Summary
    path = "summary"


def summary() -> GetSummary:
    return GetSummary()
