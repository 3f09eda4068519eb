"""
Bot Configuration

The bot holds no WCA logic of its own: it needs a Telegram token and the
address of the Cubify backend that computes rankings and comparisons.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Telegram and backend settings for the Cubify bot."""

    # === Telegram ===
    bot_token: Optional[str] = Field(default=None, description="Telegram bot token")
    telegram_bot_token: Optional[str] = Field(
        default=None,
        description="Alternative name for the token, used when BOT_TOKEN is unset"
    )
    debug: bool = Field(default=False, description="Log at DEBUG regardless of log_level")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Cubify backend ===
    backend_url: str = Field(default="http://localhost:8000", description="Cubify API base URL")
    # A profile waits for every leaderboard total of every event
    request_timeout: float = Field(default=60.0, gt=0, description="Seconds per backend request")

    @field_validator('backend_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def token(self) -> str:
        """Telegram token from BOT_TOKEN, else TELEGRAM_BOT_TOKEN."""
        token = self.bot_token or self.telegram_bot_token
        if not token:
            raise ValueError("BOT_TOKEN or TELEGRAM_BOT_TOKEN must be set")
        return token

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
