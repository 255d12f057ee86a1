"""FetchSpine HTTP client.

Provides URI composition, header normalization, rate limiting and the
FetchHttpClient that ties them together.

Example:
    >>> from fetchspine.http import FetchHttpClient
    >>>
    >>> client = FetchHttpClient(host="api.example.com", path="/v1", rate_limit_ms=250)
    >>> client.treat_uri("/items")
    'http://api.example.com/v1/items'
"""

from fetchspine.http.client import FetchHttpClient, fetch_service
from fetchspine.http.headers import header_value, merge_headers, normalize_headers
from fetchspine.http.rate_limiter import RequestGate
from fetchspine.http.request_queue import RequestQueue
from fetchspine.http.transport import FetchResponse, HttpxTransport
from fetchspine.http.uri import UriParts, compose_uri, parse_uri

__all__ = [
    "FetchHttpClient",
    "FetchResponse",
    "HttpxTransport",
    "RequestGate",
    "RequestQueue",
    "UriParts",
    "compose_uri",
    "fetch_service",
    "header_value",
    "merge_headers",
    "normalize_headers",
    "parse_uri",
]
