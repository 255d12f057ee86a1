"""FetchSpine configuration.

Application settings loaded from environment variables with FETCHSPINE_ prefix.

Example:
    >>> from fetchspine.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.rate_limit_ms
    0
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fetchspine.models.base import HttpProtocol

DEFAULT_USER_AGENT = "FetchSpine/1.0"


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FETCHSPINE_ prefix.

    Example:
        >>> from fetchspine.core.config import Settings
        >>> s = Settings(host="api.example.com", path="/v2")
        >>> s.host
        'api.example.com'
        >>> s.request_timeout
        30.0
    """

    model_config = SettingsConfigDict(
        env_prefix="FETCHSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Client defaults
    protocol: HttpProtocol = Field(default=HttpProtocol.HTTP, description="Default protocol")
    host: str = Field(default="", description="Default host")
    path: str = Field(default="", description="Default base path")
    rate_limit_ms: int = Field(default=0, ge=0, description="Minimum ms between requests")

    # Transport
    request_timeout: float = Field(default=30.0, gt=0.0)
    follow_redirects: bool = Field(default=True)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from fetchspine.core.config import get_settings
        >>> get_settings(rate_limit_ms=250).rate_limit_ms
        250
    """
    return Settings(**overrides)
