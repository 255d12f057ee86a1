"""Per-call request and response values.

These are plain dataclasses rather than pydantic models because they carry
arbitrary caller objects (bodies, parser callables, raw responses).

Example:
    >>> from fetchspine.models.request import RequestData, ResponseData
    >>> data = RequestData(body={"prop": 1})
    >>> data.allow_throw
    False
    >>> ResponseData().is_empty
    True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

ResponseBodyParser = Callable[[Any], Any]


@dataclass
class RequestData:
    """Caller-supplied data for a single request.

    Attributes:
        body: Request body. Serialized as JSON when no content type is given.
        options: Per-call request options (headers, timeout, ...). ``method``
            and ``body`` keys are ignored.
        response_body_parser: Called with the raw response body instead of
            the content-type based default parser. May be async.
        allow_throw: Re-raise errors after notifying error subscribers.
    """

    body: Any = None
    options: Mapping[str, Any] | None = None
    response_body_parser: ResponseBodyParser | None = None
    allow_throw: bool = False


@dataclass
class ResponseData:
    """Result of a request.

    Both fields are None only when the request failed and the error was
    suppressed.
    """

    response: Any = None
    body: Any = None

    @property
    def is_empty(self) -> bool:
        return self.response is None and self.body is None


@dataclass
class RequestContext:
    """Fully composed request handed to send-request subscribers."""

    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    options: dict[str, Any] = field(default_factory=dict)
