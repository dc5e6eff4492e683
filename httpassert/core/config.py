"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_name: Name of the logger the recovery boundary writes to.
        log_prefix: Tag written in front of every boundary log line.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="HTTPASSERT_"
    )

    project_name: str = "httpassert"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_name: str = "web"
    log_prefix: str = "[web] "


settings = Settings()
