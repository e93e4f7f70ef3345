"""Configuration utilities for the Dexcom client."""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables or a ``.env`` file."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_format: str = Field("json", description="Log output format (json or text)")

    # Dexcom API Configuration
    dexcom_client_id: Optional[str] = Field(None, description="Dexcom API client ID")
    dexcom_client_secret: Optional[SecretStr] = Field(None, description="Dexcom API client secret")
    dexcom_redirect_uri: Optional[str] = Field(None, description="Dexcom OAuth redirect URI")
    dexcom_sandbox: bool = Field(True, description="Talk to the sandbox host instead of production")

    request_timeout_seconds: float = Field(30.0, description="HTTP request timeout in seconds")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate the log format.

        Args:
            v: Requested format

        Returns:
            str: Normalized format name

        Raises:
            ValueError: If the format is not json or text
        """
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


class ClientConfig(BaseModel):
    """Immutable configuration handed to a client at construction."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., description="OAuth2 client ID")
    client_secret: SecretStr = Field(..., description="OAuth2 client secret")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    sandbox: bool = Field(False, description="Use the sandbox host")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Build a config from loaded settings, failing if credentials are missing."""
        if not settings.dexcom_client_id or settings.dexcom_client_secret is None:
            raise ValueError("dexcom_client_id and dexcom_client_secret are required")
        return cls(
            client_id=settings.dexcom_client_id,
            client_secret=settings.dexcom_client_secret,
            timeout=settings.request_timeout_seconds,
            sandbox=settings.dexcom_sandbox,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache settings instance.

    Returns:
        Settings: Client settings
    """
    return Settings()
