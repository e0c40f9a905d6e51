"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rolegate.application.dto import ManagerConfig


class Settings(BaseSettings):
    """rolegate settings loaded from ``ROLEGATE_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ROLEGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Permission manager
    default_guard: str = Field(default="web", description="Guard used when none is given")
    cache_enabled: bool = Field(default=False, description="Forward clear_cache to the cache")
    cache_ttl: int = Field(default=3600, ge=0, description="Advisory cache TTL in seconds")

    # Database
    database_url: str | None = Field(
        default=None,
        description="PostgreSQL connection URL; in-memory repositories when unset",
    )
    pool_min_size: int = Field(default=1, ge=0, description="Minimum pooled connections")
    pool_max_size: int = Field(default=5, ge=1, description="Maximum pooled connections")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Emit serialized JSON log records")

    def manager_config(self) -> ManagerConfig:
        return ManagerConfig(
            cache_enabled=self.cache_enabled,
            cache_ttl=self.cache_ttl,
            default_guard=self.default_guard,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
