"""Application settings using pydantic-settings.

Loads configuration from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hue bridge (written by `hue-presets setup`)
    hue_bridge_ip: str | None = Field(
        default=None,
        description="Bridge address on the local network",
    )
    hue_api_token: SecretStr | None = Field(
        default=None,
        description="Application key issued by the bridge during pairing",
    )

    # HTTP
    request_timeout: float = Field(default=10.0, gt=0)
    verify_tls: bool = Field(
        default=False,
        description="The bridge serves a self-signed certificate",
    )

    # Interaction
    settle_delay: float = Field(
        default=0.2,
        ge=0,
        description="Seconds to wait after activating a scene before re-reading lights",
    )
    status_message_timeout: float = Field(default=2.0, ge=0)

    # Setup
    discovery_url: str = Field(default="https://discovery.meethue.com")
    pairing_attempts: int = Field(default=3, ge=1, le=10)
    env_file_path: str = Field(default=".env")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        default=None,
        description="Where logs go while the interactive UI owns the terminal",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once and reused.
    """
    return Settings()
