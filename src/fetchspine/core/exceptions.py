"""Custom exceptions.

FetchSpine uses a small hierarchy of exceptions:

Example:
    >>> from fetchspine.core.exceptions import ConfigurationError, FetchSpineError
    >>> isinstance(ConfigurationError("bad path"), FetchSpineError)
    True
"""

from __future__ import annotations


class FetchSpineError(Exception):
    """Base exception for FetchSpine.

    Example:
        >>> from fetchspine.core.exceptions import FetchSpineError
        >>> str(FetchSpineError("something went wrong"))
        'something went wrong'
    """


class ConfigurationError(FetchSpineError):
    """Client configuration is invalid.

    Raised from the client constructor; the instance is never created.
    """


class TransportError(FetchSpineError):
    """The default transport failed to complete a request.

    The underlying httpx exception is available as ``__cause__``.
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url!r} failed: {reason}")
