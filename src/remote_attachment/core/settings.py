"""
Central configuration for remote_attachment.

Reads from environment variables (12-factor style) using pydantic-settings.

Usage:

    from remote_attachment.core.settings import get_settings

    settings = get_settings()
    fetcher = HTTPFetcher(timeout=settings.fetch.timeout)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FetchSettings(BaseSettings):
    """
    HTTP fetch of remote payloads. No timeout unless one is configured;
    callers own retry policy.
    """

    model_config = SettingsConfigDict(env_prefix="REMOTE_ATTACHMENT_FETCH_")

    timeout: Optional[float] = Field(
        default=None,
        description="Seconds before a payload fetch is abandoned (unset = wait forever).",
    )
    user_agent: str = Field(
        default="remote-attachment/1.0",
        description="User-Agent header sent with payload fetches.",
    )

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("REMOTE_ATTACHMENT_FETCH_TIMEOUT must be positive")
        return v


class RemoteAttachmentSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REMOTE_ATTACHMENT_")

    fetch: FetchSettings = Field(default_factory=FetchSettings)
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI (DEBUG/INFO/WARNING/ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = (v or "INFO").upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return "INFO"
        return v


@lru_cache(maxsize=1)
def get_settings() -> RemoteAttachmentSettings:
    return RemoteAttachmentSettings()
