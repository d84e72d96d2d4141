"""
Configuration module implementing the Singleton pattern for application settings.

Settings are loaded from environment variables and/or a .env file with type
validation through Pydantic Settings, and shared through a cached accessor so
every module sees the same configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings using Pydantic BaseSettings.

    Attributes:
        ENVIRONMENT: Environment configuration (development, staging, production)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_DIR: Directory holding the rotating log files
        GITHUB_API_BASE_URL: Base URL of the GitHub REST API
        GITHUB_API_VERSION: Value sent in the X-GitHub-Api-Version header
        GITHUB_TOKEN: Optional token used for authenticated GitHub requests
        GITHUB_REQUEST_TIMEOUT: Timeout in seconds for GitHub requests
    """

    # Environment configuration
    ENVIRONMENT: str = "development"  # Options: development, staging, production

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # GitHub access
    GITHUB_API_BASE_URL: str = "https://api.github.com"
    GITHUB_API_VERSION: str = "2022-11-28"
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_REQUEST_TIMEOUT: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Create and return a cached instance of the Settings class.

    Returns:
        Settings: The singleton instance of application settings
    """
    return Settings()


settings = get_settings()
