"""Shared fixtures for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    # Skip all integration tests unless RUN_WANIKANI_NETWORK_TESTS=1 and a token is set
    if os.environ.get("RUN_WANIKANI_NETWORK_TESTS") == "1" and os.environ.get("WANIKANI_API_TOKEN"):
        return
    skip = pytest.mark.skip(
        reason="Requires network access. Set RUN_WANIKANI_NETWORK_TESTS=1 and WANIKANI_API_TOKEN"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
