"""
Application Configuration Management

This module manages all application settings using Pydantic BaseSettings.
Configuration can be loaded from environment variables or .env file.

Responsibilities:
- Load and validate environment variables
- Provide typed configuration access
- Configure similarity defaults used by the API layer
- Configure logging
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
import logging


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Similarity Configuration
    SIMILARITY_THRESHOLD: float = 0.6  # 60%
    SIMILARITY_EXCLUDED_STATUSES: List[str] = ["Closed"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from settings

    Args:
        level: Log level name overriding settings.LOG_LEVEL
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT
    )
