"""Client configuration model.

ClientOptions holds the per-instance defaults a FetchHttpClient merges into
every request. Instances are frozen once validated.

Example:
    >>> from fetchspine.models.client import ClientOptions
    >>> opts = ClientOptions(host="api.example.com", path="/v1")
    >>> opts.protocol.value
    'http'
    >>> opts.rate_limit_ms
    0
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from fetchspine.models.base import FetchSpineModel, HttpProtocol


class ClientOptions(FetchSpineModel):
    """Immutable defaults for a client instance.

    Example:
        >>> from fetchspine.models.client import ClientOptions
        >>> ClientOptions(protocol="https", host="example.com").protocol
        <HttpProtocol.HTTPS: 'https'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    protocol: HttpProtocol = Field(default=HttpProtocol.HTTP, description="Default protocol")
    host: str = Field(default="", description="Default host (domain + TLD)")
    path: str = Field(default="", description="Base path prepended to every request path")
    default_request_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Options merged into every request (headers, timeout, ...)",
    )
    rate_limit_ms: int = Field(default=0, ge=0, description="Minimum ms between dispatches, 0 disables")

    @field_validator("host", mode="before")
    @classmethod
    def _strip_host(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("path")
    @classmethod
    def _path_starts_with_slash(cls, value: str) -> str:
        if value and not value.startswith("/"):
            raise ValueError(f'Provided path "{value}" does not start with a "/".')
        return value

    @property
    def is_rate_limited(self) -> bool:
        return self.rate_limit_ms > 0
