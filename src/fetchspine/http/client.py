"""HTTP client with URI composition, content negotiation and rate limiting.

FetchHttpClient is a thin layer over an injected transport. It has a
preference toward JSON: when a request carries a body and no
``Content-Type``, the body is JSON-encoded and ``application/json`` is
assumed. When a ``Content-Type`` is given, ``Accept`` is populated to prefer
the same type with a fallback to anything.

Response bodies are parsed by the caller's ``response_body_parser`` when
given; otherwise JSON responses are parsed as JSON and everything else as
text.

Errors never escape by default. They are delivered to ``on_error``
subscribers and an empty ResponseData is returned; pass
``allow_throw=True`` to have them re-raised after notification.

Example:
    >>> from fetchspine.http import FetchHttpClient
    >>>
    >>> async with FetchHttpClient(protocol="https", host="api.example.com", path="/v1") as client:
    ...     client.on_error.subscribe(lambda error: print(f"failed: {error}"))
    ...     result = await client.get("/users/42")
    ...     created = await client.post("/users", body={"name": "Ada"})
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from fetchspine.core.config import Settings, get_settings
from fetchspine.core.exceptions import ConfigurationError
from fetchspine.http.headers import header_value, merge_headers
from fetchspine.http.rate_limiter import RequestGate
from fetchspine.http.transport import HttpxTransport
from fetchspine.http.uri import compose_uri
from fetchspine.models.base import HttpProtocol
from fetchspine.models.client import ClientOptions
from fetchspine.models.request import (
    RequestContext,
    RequestData,
    ResponseBodyParser,
    ResponseData,
)
from fetchspine.notifier.event import Event
from fetchspine.protocols.transport import Transport

logger = logging.getLogger("fetchspine.http")

JSON_CONTENT_TYPE = "application/json"
ANY_CONTENT_TYPE = "*/*"
FALLBACK_ACCEPT = "*/*;q=0.9"

# Keys a caller may not set through request options
RESERVED_OPTIONS = frozenset({"method", "body"})

# Marks a keyword argument that was not passed
_UNSET: Any = object()


def _strip_reserved(options: Mapping[str, Any] | None) -> dict[str, Any]:
    if not options:
        return {}
    return {key: value for key, value in options.items() if key not in RESERVED_OPTIONS}


def _is_raw_body(body: Any) -> bool:
    return isinstance(body, (str, bytes, bytearray, memoryview))


def _has_body(body: Any) -> bool:
    # Empty strings and empty byte strings count as no body; empty containers do not
    if body is None:
        return False
    return not (_is_raw_body(body) and len(body) == 0)


class FetchHttpClient:
    """Async HTTP client with defaults, events and optional rate limiting.

    Each instance owns its configuration, its event channels and its rate
    limiting state; nothing is shared between instances.

    Attributes:
        on_send_request: Triggered with a RequestContext just before dispatch.
        on_receive_response: Triggered with the raw response on success.
        on_error: Triggered with the exception whenever a request fails.
    """

    def __init__(
        self,
        *,
        protocol: HttpProtocol | str = HttpProtocol.HTTP,
        host: str = "",
        path: str = "",
        default_request_options: Mapping[str, Any] | None = None,
        rate_limit_ms: int = 0,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            protocol: Protocol used when a URI does not name one.
            host: Host used for relative URIs (domain + TLD).
            path: Base path prepended to every request path. Must start
                with ``/`` when non-empty.
            default_request_options: Options merged into every request,
                overridable per call. ``method`` and ``body`` are ignored.
            rate_limit_ms: Minimum time between the start of consecutive
                requests. Requests made sooner are queued and sent in the
                order they were made. 0 disables limiting.
            transport: Async callable performing the network I/O. Defaults
                to an HttpxTransport owned (and closed) by this client.

        Raises:
            ConfigurationError: If ``path`` or ``rate_limit_ms`` is invalid.
        """
        defaults = dict(default_request_options or {})
        reserved = RESERVED_OPTIONS.intersection(defaults)
        if reserved:
            logger.warning("Ignoring reserved default request options: %s", ", ".join(sorted(reserved)))

        try:
            self._options = ClientOptions(
                protocol=protocol,
                host=host,
                path=path,
                default_request_options=_strip_reserved(defaults),
                rate_limit_ms=rate_limit_ms,
            )
        except ValidationError as e:
            errors = "; ".join(error["msg"] for error in e.errors())
            raise ConfigurationError(f"Could not create FetchHttpClient. {errors}") from e

        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()
        self._gate = RequestGate(self._options.rate_limit_ms)

        self.on_send_request: Event[RequestContext] = Event("send_request")
        self.on_receive_response: Event[Any] = Event("receive_response")
        self.on_error: Event[Exception] = Event("error")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        default_request_options: Mapping[str, Any] | None = None,
        transport: Transport | None = None,
    ) -> FetchHttpClient:
        """Build a client whose defaults come from Settings.

        Args:
            settings: Settings to use. Loaded from the environment if None.
            default_request_options: Options merged into every request.
            transport: Transport override. Defaults to an HttpxTransport
                configured from the same settings.
        """
        settings = settings or get_settings()
        client = cls(
            protocol=settings.protocol,
            host=settings.host,
            path=settings.path,
            default_request_options=default_request_options,
            rate_limit_ms=settings.rate_limit_ms,
            transport=transport if transport is not None else HttpxTransport.from_settings(settings),
        )
        client._owns_transport = transport is None
        return client

    def __repr__(self) -> str:
        return (
            f"FetchHttpClient(protocol={self.protocol.value!r}, host={self.host!r}, "
            f"path={self.path!r}, rate_limit_ms={self.rate_limit_ms})"
        )

    @property
    def protocol(self) -> HttpProtocol:
        return self._options.protocol

    @property
    def host(self) -> str:
        return self._options.host

    @property
    def path(self) -> str:
        return self._options.path

    @property
    def default_request_options(self) -> dict[str, Any]:
        """Copy of the options merged into every request."""
        return dict(self._options.default_request_options)

    @property
    def rate_limit_ms(self) -> int:
        return self._options.rate_limit_ms

    @property
    def options(self) -> ClientOptions:
        return self._options

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            closer = getattr(self._transport, "aclose", None)
            if closer is not None:
                await closer()

    async def __aenter__(self) -> FetchHttpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def treat_uri(self, uri: str) -> str:
        """Compose ``uri`` with this client's protocol, host and path."""
        return compose_uri(uri, protocol=self.protocol, host=self.host, path=self.path)

    def _build_headers(self, options: Mapping[str, Any], body: Any) -> tuple[dict[str, Any], bool]:
        headers = merge_headers(
            self._options.default_request_options.get("headers"),
            options.get("headers"),
        )

        content_type = headers.get("content-type")
        has_body = _has_body(body)
        if not content_type:
            is_json = has_body
        else:
            is_json = (
                has_body
                and str(content_type).lower() == JSON_CONTENT_TYPE
                and not _is_raw_body(body)
            )

        content_type_to_use = content_type or (JSON_CONTENT_TYPE if is_json else None)

        request_headers: dict[str, Any] = {"accept": ANY_CONTENT_TYPE, **headers}
        if content_type_to_use:
            request_headers["content-type"] = content_type_to_use
            request_headers["accept"] = f"{content_type_to_use}, {FALLBACK_ACCEPT}"
        return request_headers, is_json

    async def _parse_body(self, response: Any, parser: ResponseBodyParser | None) -> Any:
        if response is None:
            return None

        if parser is not None:
            result = parser(getattr(response, "body", None))
        else:
            content_type = header_value(getattr(response, "headers", None), "content-type") or ""
            # Bound methods keep access to the response's own state
            if JSON_CONTENT_TYPE in content_type.lower():
                result = response.json()
            else:
                result = response.text()

        if inspect.isawaitable(result):
            result = await result
        return result

    async def make_request(
        self,
        method: str,
        uri: str,
        request_data: RequestData | None = None,
        **fields: Any,
    ) -> ResponseData:
        """Perform a request with any HTTP method.

        Args:
            method: HTTP method.
            uri: Relative or absolute URI, composed with the client defaults.
            request_data: Body, options, parser and ``allow_throw``.
            **fields: RequestData fields given as keywords instead of
                ``request_data``.

        Returns:
            ResponseData with the response and parsed body, or an empty
            ResponseData if the request failed and ``allow_throw`` is false.

        Raises:
            Exception: Whatever the request raised, when ``allow_throw`` is true.
        """
        data = _coerce_request_data(request_data, fields)

        waited = await self._gate.acquire()
        if waited:
            logger.debug("Rate limit delayed %s %s by %.3fs", method, uri, waited)

        try:
            call_options = _strip_reserved(data.options)
            request_headers, is_json = self._build_headers(call_options, data.body)
            request_body = json.dumps(data.body, separators=(",", ":")) if is_json else data.body

            url = self.treat_uri(uri)
            request_options: dict[str, Any] = {
                **self._options.default_request_options,
                **call_options,
                "method": method,
                "headers": request_headers,
            }
            if request_body is not None:
                request_options["body"] = request_body

            self.on_send_request.trigger(
                RequestContext(
                    url=url,
                    method=method,
                    headers=dict(request_headers),
                    body=request_body,
                    options=request_options,
                )
            )
            logger.debug("Sending %s %s", method, url)

            response = await self._transport(url, request_options)

            self.on_receive_response.trigger(response)

            body = await self._parse_body(response, data.response_body_parser)
            return ResponseData(response=response, body=body)
        except Exception as error:
            logger.debug("%s %s failed: %r", method, uri, error)
            self.on_error.trigger(error)

            if data.allow_throw:
                raise

            return ResponseData()

    async def get(
        self,
        uri: str,
        request_data: RequestData | None = None,
        *,
        options: Mapping[str, Any] | None = _UNSET,
        response_body_parser: ResponseBodyParser | None = _UNSET,
        allow_throw: bool = _UNSET,
    ) -> ResponseData:
        """Send a GET request. GET takes no body.

        Keywords that are given override the matching ``request_data`` fields.
        """
        fields = _given(options=options, response_body_parser=response_body_parser, allow_throw=allow_throw)
        return await self.make_request("GET", uri, request_data, **fields)

    async def post(self, uri: str, request_data: RequestData | None = None, **fields: Any) -> ResponseData:
        """Send a POST request."""
        return await self.make_request("POST", uri, request_data, **fields)

    async def put(self, uri: str, request_data: RequestData | None = None, **fields: Any) -> ResponseData:
        """Send a PUT request."""
        return await self.make_request("PUT", uri, request_data, **fields)

    async def patch(self, uri: str, request_data: RequestData | None = None, **fields: Any) -> ResponseData:
        """Send a PATCH request."""
        return await self.make_request("PATCH", uri, request_data, **fields)

    async def delete(self, uri: str, request_data: RequestData | None = None, **fields: Any) -> ResponseData:
        """Send a DELETE request."""
        return await self.make_request("DELETE", uri, request_data, **fields)


def _given(**fields: Any) -> dict[str, Any]:
    """Drop keyword arguments the caller did not pass."""
    return {name: value for name, value in fields.items() if value is not _UNSET}


def _coerce_request_data(request_data: RequestData | None, fields: dict[str, Any]) -> RequestData:
    if request_data is None:
        return RequestData(**fields)
    if fields:
        return dataclasses.replace(request_data, **fields)
    return request_data


# Shared client with no defaults for one-off requests
fetch_service = FetchHttpClient()

__all__ = ["FetchHttpClient", "fetch_service"]
