"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Federation APIs ===
    federation_api_url: str = Field(
        default="https://raw.githubusercontent.com/robiningelbrecht/wca-rest-api/master/api",
        description="Static federation API (person files, leaderboard totals)"
    )
    wca_api_url: str = Field(
        default="https://www.worldcubeassociation.org/api/v0",
        description="Live federation API (avatars)"
    )
    wca_profile_url: str = Field(
        default="https://www.worldcubeassociation.org/persons",
        description="Public profile page base URL"
    )

    # === HTTP ===
    request_timeout: float = Field(default=15.0, gt=0, description="Seconds per request")
    max_concurrent_requests: int = Field(
        default=12,
        ge=1,
        description="Upper bound on in-flight federation requests"
    )

    @field_validator('federation_api_url', 'wca_api_url', 'wca_profile_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
