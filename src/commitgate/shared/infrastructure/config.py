"""
Runtime settings using Pydantic Settings.

Loads settings from COMMITGATE_* environment variables and a .env file.
Project-level check configuration lives in .commitgate.yaml (see
commitgate.config); these settings only steer how the tool itself behaves.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="COMMITGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="commitgate", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="WARNING", description="Logging level")

    # Gate
    config_file: str = Field(
        default=".commitgate.yaml",
        description="Project configuration file, relative to the repository root",
    )
    default_timeout: float = Field(
        default=900.0,
        gt=0,
        description="Timeout in seconds for a check command without its own timeout",
    )
    skip_env_var: str = Field(
        default="SKIP",
        description="Environment variable holding comma separated check names to skip",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"


# Global settings instance
settings = Settings()
