"""
Configuration settings for the Mochow client.
This module manages all environment variables and client defaults.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main settings class for the Mochow client."""

    # Project settings
    PROJECT_NAME: str = "mochow-client"
    VERSION: str = "1.0.0"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Service endpoint and credentials
    ENDPOINT: Optional[str] = Field(default=None, description="Service URL, e.g. http://127.0.0.1:8287")
    ACCOUNT: Optional[str] = Field(default=None, description="Account used for authentication")
    API_KEY: Optional[str] = Field(default=None, description="API key used for authentication")
    URL_VERSION_PREFIX: str = Field(default="v1")

    # HTTP settings
    TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    MAX_RETRIES: int = Field(default=3, ge=0)
    RETRY_BACKOFF_FACTOR: float = Field(default=1.0, ge=0)

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO")
    LOG_TO_CONSOLE: bool = Field(default=False, description="Attach a stderr handler to client loggers")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="MOCHOW_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get client settings."""
    return settings
