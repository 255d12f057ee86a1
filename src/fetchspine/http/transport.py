"""Default httpx-backed transport.

HttpxTransport implements the Transport protocol on top of a lazily created
``httpx.AsyncClient``. Responses are wrapped in FetchResponse so body
parsing goes through the same async ``json()``/``text()`` surface whatever
transport is injected.

Example:
    >>> from fetchspine.http.transport import HttpxTransport
    >>>
    >>> async with HttpxTransport(timeout=10.0) as transport:
    ...     response = await transport("https://example.com", {"method": "GET"})
    ...     text = await response.text()
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from fetchspine.core.config import DEFAULT_USER_AGENT, Settings
from fetchspine.core.exceptions import TransportError

logger = logging.getLogger("fetchspine.http.transport")

# Request keyword arguments forwarded to httpx.AsyncClient.request
PASS_THROUGH_OPTIONS = frozenset(
    {"params", "cookies", "auth", "timeout", "follow_redirects", "extensions"}
)


class FetchResponse:
    """Response-like wrapper around ``httpx.Response``.

    Attributes:
        raw: The wrapped httpx response.
        headers: Case-insensitive response headers.
        body: Raw response bytes.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.raw = response
        self.headers = response.headers

    def __repr__(self) -> str:
        return f"<FetchResponse [{self.status_code}] {self.url}>"

    @property
    def body(self) -> bytes:
        return self.raw.content

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def ok(self) -> bool:
        return self.raw.is_success

    @property
    def url(self) -> str:
        return str(self.raw.url)

    async def json(self) -> Any:
        return json.loads(self.raw.content)

    async def text(self) -> str:
        return self.raw.text


class HttpxTransport:
    """Transport that sends requests with ``httpx.AsyncClient``.

    Non-2xx responses are returned, not raised; only failures to obtain a
    response become TransportError.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
        **client_kwargs: Any,
    ) -> None:
        """Initialize transport.

        Args:
            timeout: Default request timeout in seconds.
            follow_redirects: Follow redirects by default.
            user_agent: User-Agent header sent unless a request overrides it.
            client: Pre-built client to use instead of creating one. It is
                not closed by ``aclose``.
            **client_kwargs: Extra ``httpx.AsyncClient`` arguments
                (``transport``, ``verify``, ...).
        """
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._user_agent = user_agent
        self._client_kwargs = client_kwargs
        self._client = client
        self._owns_client = client is None
        self._client_loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **client_kwargs: Any) -> HttpxTransport:
        """Build a transport from Settings."""
        return cls(
            timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
            user_agent=settings.user_agent,
            **client_kwargs,
        )

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client.

        An owned client is bound to the event loop that created it; a call
        from a different loop gets a fresh client, since pooled connections
        cannot be reused across loops.
        """
        loop = asyncio.get_running_loop()
        if self._owns_client and self._client is not None and self._client_loop is not loop:
            logger.debug("Event loop changed, creating a new httpx client")
            self._client = None
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=self._follow_redirects,
                **self._client_kwargs,
            )
            self._owns_client = True
            self._client_loop = loop
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None if self._owns_client else self._client

    async def __aenter__(self) -> HttpxTransport:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _build_request_kwargs(self, options: Mapping[str, Any]) -> dict[str, Any]:
        unknown = set(options) - PASS_THROUGH_OPTIONS - {"method", "headers", "body"}
        if unknown:
            raise TypeError(f"Unsupported request options: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {key: options[key] for key in PASS_THROUGH_OPTIONS if key in options}
        headers = options.get("headers")
        if headers:
            kwargs["headers"] = {name: str(value) for name, value in headers.items()}
        body = options.get("body")
        if body is not None:
            kwargs["content"] = body
        return kwargs

    async def __call__(self, url: str, options: Mapping[str, Any]) -> FetchResponse:
        """Send a request.

        Args:
            url: Absolute URL.
            options: ``method``, ``headers``, ``body`` plus pass-through
                httpx options.

        Returns:
            Wrapped response.

        Raises:
            TransportError: If httpx could not complete the request.
            TypeError: If ``options`` holds keys httpx does not accept.
        """
        method = str(options.get("method", "GET")).upper()
        kwargs = self._build_request_kwargs(options)
        client = self._ensure_client()

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(url, f"timeout: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e
        except httpx.InvalidURL as e:
            raise TransportError(url, f"invalid URL: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return FetchResponse(response)


__all__ = ["FetchResponse", "HttpxTransport", "PASS_THROUGH_OPTIONS"]
