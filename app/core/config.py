"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Turn the per-client rate limit on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: SQLAlchemy URL of the content database.
        media_root: Filesystem root for uploaded assets.
        public_files_url: URL prefix under which assets are served.
        default_store_code: Store used when a request names none.
        default_store_languages: Languages of the seeded default store.
        strict_page_lookup: Answer 404 instead of a null body for
            missing pages.
        summary_prefix: Code prefix selecting summary boxes.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Storefront Content API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    database_url: str = "sqlite:///./var/content.db"
    media_root: Path = Path("./var/media")
    public_files_url: str = "/static/files"

    default_store_code: str = "DEFAULT"
    default_store_languages: list[str] = Field(default_factory=lambda: ["en", "fr"])

    strict_page_lookup: bool = False
    summary_prefix: str = "summary_"


settings = Settings()
