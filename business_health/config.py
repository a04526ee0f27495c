"""Configuration management using environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL"
    )

    # Analysis defaults
    default_sentiment_period: int = Field(
        default=6,
        ge=1,
        le=6,
        alias="DEFAULT_SENTIMENT_PERIOD"
    )
    location_name: str = Field(
        default="All Locations",
        alias="LOCATION_NAME"
    )

    # Reports
    report_output_dir: Path = Field(
        default=Path("reports"),
        alias="REPORT_OUTPUT_DIR"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
