"""
Pydantic-based configuration settings for the Konduto SDK.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://api.konduto.com/v1"


class KondutoSettings(BaseSettings):
    """
    Settings for the Konduto SDK.

    Configuration can be provided via:
    - Environment variables with KONDUTO_ prefix
    - .env file in current directory
    - Direct instantiation with kwargs

    Example:
        ```python
        # From environment (KONDUTO_API_KEY, KONDUTO_TIMEOUT, ...)
        settings = KondutoSettings()

        # Direct configuration
        settings = KondutoSettings(api_key="T01234567890123456789", timeout=10)
        konduto.configure(settings)
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="KONDUTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid endpoint: {v}")
        return v.rstrip("/")

    def is_sandbox(self) -> bool:
        """Check if the configured key is a sandbox (test) key."""
        return bool(self.api_key) and self.api_key.startswith("T")

    def to_dict(self) -> dict:
        """Convert settings to dictionary, with the API key masked."""
        data = self.model_dump()
        if data["api_key"]:
            data["api_key"] = data["api_key"][:1] + "*" * (len(data["api_key"]) - 1)
        return data


@lru_cache
def get_settings(env_file: str | None = None) -> KondutoSettings:
    """
    Get cached settings instance.

    To reload settings, clear the cache with `get_settings.cache_clear()`.

    Args:
        env_file: Optional path to .env file

    Returns:
        Settings instance
    """
    if env_file:
        return KondutoSettings(_env_file=env_file)

    if Path(".env").exists():
        return KondutoSettings(_env_file=".env")

    return KondutoSettings()
