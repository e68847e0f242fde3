"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes the interactive docs).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every router is mounted under.
        cors_allow_origins: Origins allowed to call the API. The local
            desktop API accepts any origin by default.
        rate_limit_enabled: Turn the rate limiter on or off.
        rate_limit_default: Default rate limit for rate-limited endpoints.
        max_page_limit: Largest ``limit`` a listing endpoint accepts.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Istek API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_allow_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    max_page_limit: int = 1000


settings = Settings()
