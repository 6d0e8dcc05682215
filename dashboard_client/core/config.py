"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings`` together with the immutable :class:`ClientConfig`
each :class:`~dashboard_client.clients.http_client.DashboardClient`
owns.  The settings control the API address, credential, request
timeout and the rate-limit retry policy.  The values provided here are
sensible defaults but can be overridden via environment variables at
deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.dashboard.example.com/api/v1"
DEFAULT_USER_AGENT = "dashboard-client/0.1"


class Settings(BaseSettings):
    """Where the dashboard lives, how to authenticate and how patient to be.

    Each field reads ``DASHBOARD_<FIELD>`` (case-insensitive), e.g.
    ``DASHBOARD_API_KEY`` for the bearer credential or
    ``DASHBOARD_RETRY_DELAY=2`` to wait two seconds after a 429 that
    carries no ``Retry-After``.  Turn these into a per-client
    :class:`ClientConfig` with :meth:`ClientConfig.from_settings`.
    """

    base_url: str = Field(DEFAULT_BASE_URL, min_length=1, description="API origin including the version prefix.")
    api_key: str = Field("", description="Credential sent as a bearer token on every request.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header value.")

    # HTTP client settings
    http_timeout: float = Field(60.0, gt=0, description="Per-request timeout in seconds.")

    # Rate-limit handling
    max_retries: int = Field(10, ge=0, description="Maximum number of retries after a 429 response.")
    retry_delay: float = Field(1.0, ge=0, description="Delay in seconds between retries when no Retry-After is sent.")

    # Pagination guard
    max_pages: Optional[int] = Field(None, ge=1, description="Maximum number of pages followed per call (unbounded if unset).")

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Using a cache prevents repeated environment parsing.  Call
    ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()


class ClientConfig(BaseModel):
    """Immutable configuration of one client instance.

    Shared read-only by every concurrent call issued through the same
    client, so no locking is needed.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    timeout: float = Field(60.0, gt=0)
    max_retries: int = Field(10, ge=0)
    retry_delay: float = Field(1.0, ge=0)
    max_pages: Optional[int] = Field(None, ge=1)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ClientConfig":
        """Build a configuration from environment-backed settings."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.http_timeout,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay,
            max_pages=settings.max_pages,
            user_agent=settings.user_agent,
        )
