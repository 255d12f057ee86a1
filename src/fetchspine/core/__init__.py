"""Core configuration and utilities."""

from fetchspine.core.config import Settings, get_settings
from fetchspine.core.exceptions import (
    ConfigurationError,
    FetchSpineError,
    TransportError,
)
from fetchspine.core.logging import setup_logging

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "setup_logging",
    # Errors
    "ConfigurationError",
    "FetchSpineError",
    "TransportError",
]
