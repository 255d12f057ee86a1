"""URI composition.

Merges a client's default protocol, host and base path with the URI given
at a call site. Relative URIs inherit all three defaults; URIs carrying
their own scheme or host only inherit the base path (and the protocol when
none was given).

Example:
    >>> from fetchspine.http.uri import compose_uri
    >>> compose_uri("/users", protocol="https", host="api.example.com", path="/v1")
    'https://api.example.com/v1/users'
    >>> compose_uri("gmail.com/somewhere", host="google.com", path="/api")
    'http://gmail.com/api/somewhere'
    >>> compose_uri("/relative", path="/api")
    '/api/relative'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from fetchspine.models.base import HttpProtocol

# Host is letters, digits and dots only; anything else must be the path.
URI_PATTERN = re.compile(
    r"(?:(?P<protocol>[a-z]+)://)?(?P<host>[a-z0-9.]+)?(?P<path>/.*)?",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class UriParts:
    """Pieces captured from a URI string. Missing pieces are None."""

    protocol: str | None = None
    host: str | None = None
    path: str | None = None

    @property
    def is_relative(self) -> bool:
        return not self.protocol and not self.host


def parse_uri(uri: str) -> UriParts | None:
    """Split a URI into protocol, host and path.

    Returns:
        The captured parts, or None when the string does not have the
        ``[scheme://][host][/path]`` shape.

    Example:
        >>> parse_uri("https://example.com/a/b")
        UriParts(protocol='https', host='example.com', path='/a/b')
        >>> parse_uri("not a uri") is None
        True
    """
    match = URI_PATTERN.fullmatch(uri.strip())
    if match is None:
        return None
    return UriParts(**match.groupdict())


def compose_uri(
    uri: str,
    *,
    protocol: HttpProtocol | str = HttpProtocol.HTTP,
    host: str = "",
    path: str = "",
) -> str:
    """Compose the final request URI.

    Args:
        uri: URI given at the call site.
        protocol: Default protocol.
        host: Default host; empty means none.
        path: Base path; empty means none.

    Returns:
        The composed URI, or an empty string if ``uri`` is not URI-shaped.
    """
    parts = parse_uri(uri)
    if parts is None:
        return ""

    default_protocol = HttpProtocol(protocol).value
    captured_path = parts.path or ""

    if parts.is_relative:
        prefix = f"{default_protocol}://{host}" if host else ""
        return f"{prefix}{path}{captured_path}"

    return f"{parts.protocol or default_protocol}://{parts.host or host}{path}{captured_path}"


__all__ = ["URI_PATTERN", "UriParts", "compose_uri", "parse_uri"]
