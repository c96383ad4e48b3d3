"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from poap.core.config import get_settings

    settings = get_settings()
    if settings.store_backend == StoreBackend.REDIS:
        ...
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from poap.core.enums import Environment


class StoreBackend(str, Enum):
    """Persistent key-value store implementations."""

    MEMORY = "memory"
    REDIS = "redis"


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="dsrv-poap",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Storage configuration
    store_backend: StoreBackend = Field(
        default=StoreBackend.MEMORY,
        description="Key-value store backend (memory, redis)",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (e.g., redis://host:port/db), required for redis backend",
    )
    storage_key_prefix: str = Field(
        default="",
        description="Prefix prepended to every storage key (isolates deployments sharing one Redis)",
    )

    # Address validation
    address_prefix: str | None = Field(
        default=None,
        description="Bech32 human-readable prefix for account addresses (e.g., 'juno'). "
        "Unset selects basic length/normalization validation.",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("address_prefix")
    @classmethod
    def validate_address_prefix(cls, v: str | None) -> str | None:
        """Bech32 prefixes are lowercase; an empty value means unset."""
        if not v:
            return None
        return v.lower()

    @model_validator(mode="after")
    def require_redis_url(self) -> "Settings":
        """Redis backend cannot start without a connection URL."""
        if self.store_backend == StoreBackend.REDIS and not self.redis_url:
            raise ValueError("redis_url is required when store_backend is 'redis'")
        return self

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, log_level otherwise."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def uses_json_logs(self) -> bool:
        """Machine-readable logs everywhere except local development."""
        return self.environment != Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
