"""Base models and shared types.

Example:
    >>> from fetchspine.models.base import HttpProtocol
    >>> HttpProtocol.HTTPS.value
    'https'
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class HttpProtocol(str, Enum):
    """Protocol used when a client composes absolute URIs.

    Example:
        >>> list(HttpProtocol)
        [<HttpProtocol.HTTP: 'http'>, <HttpProtocol.HTTPS: 'https'>]
    """

    HTTP = "http"
    HTTPS = "https"


class FetchSpineModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )
