"""Transport protocol.

A transport performs the actual network I/O for a client. FetchHttpClient
only relies on the small surface described here, so any async callable
returning a response-like object can be injected (a fake in tests, the
httpx-backed default in production).

Example:
    >>> from fetchspine.protocols.transport import Transport
    >>> async def fake(url, options):
    ...     return None
    >>> isinstance(fake, Transport)
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HeadersLike(Protocol):
    """Case-insensitive header lookup."""

    def get(self, name: str, default: Any = None) -> Any:
        ...


@runtime_checkable
class ResponseLike(Protocol):
    """Response surface consumed by the body-parsing step."""

    headers: HeadersLike
    body: Any

    async def json(self) -> Any:
        """Parse the body as JSON."""
        ...

    async def text(self) -> str:
        """Decode the body as text."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Async callable that sends a request and returns a response."""

    async def __call__(self, url: str, options: Mapping[str, Any]) -> ResponseLike:
        """Send ``options`` (method, headers, body, ...) to ``url``."""
        ...
