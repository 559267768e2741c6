"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    root_domain: str = Field(
        default="localhost:3000",
        description="Canonical root domain for subdomain-based routing (may include a port)",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug_routing: bool = Field(default=False, description="Log every routing decision")

    @field_validator("root_domain")
    @classmethod
    def _check_root_domain(cls, value: str) -> str:
        value = value.strip()
        if not value.split(":")[0]:
            raise ValueError("root_domain must name a host")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get the application settings instance."""
    return Settings()
