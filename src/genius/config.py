"""Client configuration schema."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

BASE_URL = "https://api.genius.com"


class ClientConfig(BaseModel):
    """Connection settings for ``GeniusClient``.

    ``timeout`` only applies when the client builds its own ``httpx.Client``;
    the other settings are sent with every request.
    """

    base_url: str = BASE_URL
    timeout: Optional[float] = 30.0
    user_agent: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {value!r}")
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value
