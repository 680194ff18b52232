"""Application configuration using pydantic-settings."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def log_level_value(self) -> int:
        """Resolve LOG_LEVEL to a numeric logging level, defaulting to INFO."""
        level = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """
    Configure root logging for a host application.

    Args:
        level: Explicit logging level; falls back to settings.LOG_LEVEL
    """
    logging.basicConfig(
        level=level if level is not None else settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Global settings instance
settings = Settings()
