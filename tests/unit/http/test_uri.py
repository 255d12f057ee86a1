"""Tests for URI composition.

Tests cover:
- Parsing into protocol/host/path
- Relative URIs inheriting protocol, host and base path
- Absolute URIs keeping their own protocol and host
- Inputs that are not URI-shaped
"""

import pytest

from fetchspine.http.uri import UriParts, compose_uri, parse_uri
from fetchspine.models.base import HttpProtocol

HOST = "google.com"

# =============================================================================
# Parsing Tests
# =============================================================================


class TestParseUri:
    """Tests for splitting URIs."""

    def test_full_uri(self):
        """A full URI splits into protocol, host and path."""
        assert parse_uri("https://my.site.com/a/b") == UriParts("https", "my.site.com", "/a/b")

    def test_bare_host_is_host(self):
        """A bare domain is read as a host."""
        assert parse_uri("google.com") == UriParts(None, "google.com", None)

    def test_path_only_is_relative(self):
        """A path-only URI is relative."""
        parts = parse_uri("/relative-endpoint")
        assert parts == UriParts(None, None, "/relative-endpoint")
        assert parts.is_relative

    def test_empty_is_relative(self):
        """An empty URI is relative with no parts."""
        parts = parse_uri("")
        assert parts == UriParts()
        assert parts.is_relative

    def test_whitespace_is_trimmed(self):
        """Surrounding whitespace is ignored."""
        assert parse_uri("  /x  ") == UriParts(None, None, "/x")

    @pytest.mark.parametrize("uri", ["not a uri", "relative-endpoint", "host:8080/x", "my-site.com/x"])
    def test_non_matching(self, uri):
        """Inputs that are not URI-shaped do not parse."""
        assert parse_uri(uri) is None

    def test_protocol_is_case_insensitive(self):
        """The protocol matches regardless of case."""
        assert parse_uri("HTTPS://Example.COM").protocol == "HTTPS"


# =============================================================================
# Composition Tests
# =============================================================================


class TestComposeUri:
    """Tests for merging defaults with call-site URIs."""

    def test_includes_default_protocol_host_and_path(self):
        """A relative URI gets the default protocol, host and path."""
        assert compose_uri("/some/endpoint", protocol="http", host=HOST, path="/api") == (
            "http://google.com/api/some/endpoint"
        )

    def test_no_defaults(self):
        """Without defaults the URI is returned as given."""
        assert compose_uri("/relative-endpoint") == "/relative-endpoint"
        assert compose_uri("https://my.site.com") == "https://my.site.com"

    def test_default_protocol_only(self):
        """A default protocol applies only when a host is present."""
        kwargs = {"protocol": HttpProtocol.HTTPS}
        assert compose_uri("/somewhere", **kwargs) == "/somewhere"
        assert compose_uri(f"{HOST}/somewhere", **kwargs) == f"https://{HOST}/somewhere"
        assert compose_uri(f"http://{HOST}/somewhere", **kwargs) == f"http://{HOST}/somewhere"

    def test_default_host_only(self):
        """A default host fills in for relative URIs only."""
        assert compose_uri("/somewhere", host=HOST) == f"http://{HOST}/somewhere"
        assert compose_uri("other.com/somewhere", host=HOST) == "http://other.com/somewhere"
        assert compose_uri("https://other.com/somewhere", host=HOST) == "https://other.com/somewhere"

    def test_default_path_only(self):
        """The base path is prefixed to every URI path."""
        assert compose_uri("/somewhere", path="/api") == "/api/somewhere"
        assert compose_uri("other.com/somewhere", path="/api") == "http://other.com/api/somewhere"
        assert compose_uri("https://other.com/somewhere", path="/api") == "https://other.com/api/somewhere"

    def test_protocol_and_host(self):
        """Protocol and host defaults combine."""
        kwargs = {"protocol": "https", "host": HOST}
        assert compose_uri("", **kwargs) == "https://google.com"
        assert compose_uri(f"{HOST}/somewhere", **kwargs) == f"https://{HOST}/somewhere"
        assert compose_uri(f"http://{HOST}/somewhere", **kwargs) == f"http://{HOST}/somewhere"

    def test_protocol_and_path(self):
        """Protocol and path defaults combine."""
        kwargs = {"protocol": "https", "path": "/private/api"}
        assert compose_uri(HOST, **kwargs) == "https://google.com/private/api"
        assert compose_uri(f"{HOST}/somewhere", **kwargs) == f"https://{HOST}/private/api/somewhere"
        assert compose_uri(f"http://{HOST}/somewhere", **kwargs) == f"http://{HOST}/private/api/somewhere"

    def test_host_and_path(self):
        """Host and path defaults combine."""
        kwargs = {"host": HOST, "path": "/api"}
        assert compose_uri("", **kwargs) == f"http://{HOST}/api"
        assert compose_uri("gmail.com/somewhere", **kwargs) == "http://gmail.com/api/somewhere"
        assert compose_uri("https://gmail.com/somewhere", **kwargs) == "https://gmail.com/api/somewhere"

    def test_empty_without_defaults(self):
        """An empty URI with no defaults stays empty."""
        assert compose_uri("") == ""

    def test_empty_with_host_has_no_trailing_path(self):
        """A blank URI composes to the bare origin."""
        assert compose_uri("   ", protocol="http", host=HOST) == "http://google.com"

    def test_non_matching_yields_empty_string(self):
        """Unparseable input composes to an empty string."""
        assert compose_uri("not a uri", host=HOST, path="/api") == ""
