"""Unit tests for core enums."""

import pytest

from wanikani.core.enums import CachePolicy, StatusCode, SubjectKind


class TestStatusCode:
    """Test the known status code set."""

    @pytest.mark.parametrize("status", [200, 304])
    def test_success_codes(self, status):
        """Test 200 and 304 are successful."""
        assert StatusCode(status).is_success

    @pytest.mark.parametrize("status", [401, 403, 404, 422, 429, 500, 503])
    def test_error_codes(self, status):
        """Test every other known code is not successful."""
        assert not StatusCode(status).is_success

    def test_from_status_known(self):
        """Test from_status returns the member for a known code."""
        assert StatusCode.from_status(429) is StatusCode.TOO_MANY_REQUESTS

    @pytest.mark.parametrize("status", [201, 302, 418, 502, 0])
    def test_from_status_unknown(self, status):
        """Test from_status returns None for codes outside the set."""
        assert StatusCode.from_status(status) is None


def test_subject_kind_values():
    """Test subject kinds serialize to the wire values."""
    assert [k.value for k in SubjectKind] == ["radical", "kanji", "vocabulary"]


def test_cache_policy_default_member():
    """Test both cache policies exist."""
    assert CachePolicy("use_protocol_cache_policy") is CachePolicy.USE_PROTOCOL_CACHE_POLICY
    assert CachePolicy("return_cache_data_else_load") is CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD
