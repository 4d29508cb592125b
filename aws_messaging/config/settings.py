"""Application settings and configuration management.

Values in a ``.env`` file found from the working directory are loaded into
the process environment first, so boto3's own credential and region chain
sees them as well as these settings. Variables already set in the
environment win over the file.
"""
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """AWS client configuration.

    Anything left unset falls through to boto3's own resolution chain.
    """

    region: Optional[str] = None
    endpoint_url: Optional[str] = None  # e.g. http://localhost:4566 for LocalStack

    model_config = SettingsConfigDict(env_prefix="AWS_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    aws: AWSSettings = Field(default_factory=AWSSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings() -> Settings:
    """Load .env into os.environ and build settings from the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings()


# Global settings instance
settings = load_settings()
