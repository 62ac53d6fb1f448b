"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_DEMO_USERS = ["alice", "bob", "carol", "dave"]
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="insyd-notify-server",
        description="Service name reported by the health endpoint",
        min_length=1,
    )
    database_url: str = Field(
        default="sqlite:///./insyd_notify.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp posts and notifications",
    )
    demo_users: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEMO_USERS),
        description="Roster of user identifiers that receive post notifications",
    )
    notification_default_limit: int = Field(
        default=50,
        description="Page size used when the client does not request one",
        gt=0,
    )
    notification_max_limit: int = Field(
        default=100,
        description="Upper bound applied to every notification page request",
        gt=0,
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
        return normalized

    @model_validator(mode="after")
    def _validate_limits_and_roster(self) -> "Settings":
        if self.notification_default_limit > self.notification_max_limit:
            raise ValueError(
                "NOTIFICATION_DEFAULT_LIMIT cannot exceed NOTIFICATION_MAX_LIMIT"
            )
        if any(not user or not user.strip() for user in self.demo_users):
            raise ValueError("DEMO_USERS cannot contain blank identifiers")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
