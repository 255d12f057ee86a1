"""
FetchSpine - Small async HTTP client layer.

FetchSpine wraps an injectable transport with the conveniences most API
clients end up rewriting: default protocol/host/path, JSON-first content
negotiation, response body parsing, FIFO rate limiting and lifecycle events.

Key Features:
- Base URL and base path composition with per-call overrides
- JSON by default, caller-chosen content types passed through untouched
- Minimum interval rate limiting with strict FIFO dispatch
- send/receive/error event channels
- Errors reported, not raised, unless a call opts in with allow_throw

Quick Start:
    >>> from fetchspine import FetchHttpClient
    >>> async with FetchHttpClient(protocol="https", host="api.example.com") as client:
    ...     result = await client.get("/status")
    ...     print(result.body)
"""

from fetchspine.core.config import Settings, get_settings
from fetchspine.core.exceptions import (
    ConfigurationError,
    FetchSpineError,
    TransportError,
)
from fetchspine.core.logging import setup_logging
from fetchspine.http import (
    FetchHttpClient,
    FetchResponse,
    HttpxTransport,
    RequestGate,
    RequestQueue,
    compose_uri,
    fetch_service,
    normalize_headers,
)
from fetchspine.models import (
    ClientOptions,
    HttpProtocol,
    RequestContext,
    RequestData,
    ResponseData,
)
from fetchspine.notifier import Event
from fetchspine.protocols import ResponseLike, Transport

__version__ = "0.1.0"

__all__ = [
    # Client
    "FetchHttpClient",
    "fetch_service",
    # Models
    "ClientOptions",
    "HttpProtocol",
    "RequestContext",
    "RequestData",
    "ResponseData",
    # Building blocks
    "Event",
    "RequestGate",
    "RequestQueue",
    "compose_uri",
    "normalize_headers",
    # Transport
    "FetchResponse",
    "HttpxTransport",
    "ResponseLike",
    "Transport",
    # Configuration
    "Settings",
    "get_settings",
    "setup_logging",
    # Errors
    "ConfigurationError",
    "FetchSpineError",
    "TransportError",
]
