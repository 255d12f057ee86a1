"""Data models for FetchSpine."""

from fetchspine.models.base import FetchSpineModel, HttpProtocol
from fetchspine.models.client import ClientOptions
from fetchspine.models.request import (
    RequestContext,
    RequestData,
    ResponseBodyParser,
    ResponseData,
)

__all__ = [
    "ClientOptions",
    "FetchSpineModel",
    "HttpProtocol",
    "RequestContext",
    "RequestData",
    "ResponseBodyParser",
    "ResponseData",
]
