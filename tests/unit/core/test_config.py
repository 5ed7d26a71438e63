"""Unit tests for configuration and API versioning."""

from wanikani.core.config import (
    APPLICATION_JSON,
    BASE_URL,
    DEFAULT_USER_AGENT,
    REVISION_HEADER,
    APIVersion,
    Configuration,
)
from wanikani.runtime.rest.request import HTTPRequest


class TestAPIVersion:
    """Test APIVersion."""

    def test_v2(self):
        """Test the v2 version and revision."""
        assert APIVersion.V2.version == "v2"
        assert APIVersion.V2.revision == "20170710"
        assert APIVersion.V2.base_url == BASE_URL

    def test_url_for_path(self):
        """Test a path is joined under the versioned base."""
        assert APIVersion.V2.url_for("assignments") == "https://api.wanikani.com/v2/assignments"

    def test_url_for_strips_leading_slash(self):
        """Test a leading slash does not produce a double slash."""
        assert APIVersion.V2.url_for("/user") == "https://api.wanikani.com/v2/user"

    def test_url_for_empty_path(self):
        """Test an empty path targets exactly the versioned base."""
        assert APIVersion.V2.url_for("") == "https://api.wanikani.com/v2"


class TestConfiguration:
    """Test Configuration."""

    def test_default(self):
        """Test the default configuration."""
        config = Configuration.default()
        assert config.version is APIVersion.V2
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.token is None

    def test_apply_headers_without_token(self):
        """Test an unauthenticated configuration sends no Authorization header."""
        request = HTTPRequest(url=BASE_URL)
        Configuration().apply_headers(request)
        assert request.headers == {
            "User-Agent": DEFAULT_USER_AGENT,
            "Accept": APPLICATION_JSON,
            REVISION_HEADER: "20170710",
        }

    def test_apply_headers_with_token(self):
        """Test the bearer credential is added when a token is set."""
        request = HTTPRequest(url=BASE_URL)
        Configuration(token="secret", user_agent="tests/1.0").apply_headers(request)
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["User-Agent"] == "tests/1.0"
