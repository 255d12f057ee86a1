"""Header normalization helpers.

Headers may arrive as a header collection (``httpx.Headers`` or any other
mapping), a plain dict, or a sequence of ``(name, value)`` pairs. They are
normalized to a dict with lowercased names so later sources can override
earlier ones regardless of the caller's casing.

Example:
    >>> from fetchspine.http.headers import merge_headers, normalize_headers
    >>> normalize_headers([("Content-Type", "text/plain")])
    {'content-type': 'text/plain'}
    >>> merge_headers({"Authorization": "1234", "X-Powered-By": "me"}, {"authorization": "blah"})
    {'authorization': 'blah', 'x-powered-by': 'me'}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

HeadersInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def normalize_headers(headers: HeadersInput) -> dict[str, Any]:
    """Lowercase header names, leaving values untouched."""
    if not headers:
        return {}

    if isinstance(headers, Mapping):
        pairs: Iterable[tuple[str, Any]] = headers.items()
    elif isinstance(headers, (str, bytes)):
        raise TypeError(f"Headers must be a mapping or a sequence of pairs, got {type(headers).__name__}")
    else:
        pairs = headers

    normalized: dict[str, Any] = {}
    for name, value in pairs:
        normalized[str(name).lower()] = value
    return normalized


def merge_headers(*sources: HeadersInput) -> dict[str, Any]:
    """Normalize and merge header sources; later sources win per name."""
    merged: dict[str, Any] = {}
    for source in sources:
        merged.update(normalize_headers(source))
    return merged


def header_value(headers: Any, name: str) -> str | None:
    """Case-insensitive lookup on a response's header collection."""
    if headers is None:
        return None
    getter = getattr(headers, "get", None)
    if getter is None:
        return None
    value = getter(name)
    if value is None and isinstance(headers, Mapping):
        value = normalize_headers(headers).get(name.lower())
    return None if value is None else str(value)


__all__ = ["HeadersInput", "header_value", "merge_headers", "normalize_headers"]
