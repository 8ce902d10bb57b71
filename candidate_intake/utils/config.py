"""
Configuration management for Candidate Intake.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from candidate_intake.utils.constants import MAX_RESUME_SIZE_BYTES


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "candidate_intake"
    username: str | None = None
    password: str | None = None
    server_selection_timeout_ms: int = 5000

    @property
    def connection_string(self) -> str:
        """Generate MongoDB connection string."""
        if self.username and self.password:
            return f"mongodb://{self.username}:{self.password}@{self.host}:{self.port}"
        return f"mongodb://{self.host}:{self.port}"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "candidate_intake.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class IntakeSettings(BaseSettings):
    """Candidate submission limits."""

    model_config = SettingsConfigDict(env_prefix="INTAKE_")

    max_resume_size_bytes: int = MAX_RESUME_SIZE_BYTES

    @field_validator("max_resume_size_bytes")
    @classmethod
    def validate_max_resume_size(cls, v: int) -> int:
        """Reject non-positive size limits."""
        if v <= 0:
            raise ValueError("max_resume_size_bytes must be positive")
        return v


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "Candidate Intake"
    version: str = "0.1.0"
    description: str = "Candidate submission intake for applicant tracking"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    intake: IntakeSettings = Field(default_factory=IntakeSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
