"""Protocol definitions for FetchSpine collaborators."""

from fetchspine.protocols.transport import HeadersLike, ResponseLike, Transport

__all__ = [
    "HeadersLike",
    "ResponseLike",
    "Transport",
]
