from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from peerfinder.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "PeerFinder"
    APP_ENV: Literal["development", "production", "test"] = "production"

    # Remote profile repository. Empty means the in-memory repository is used.
    REPOSITORY_URL: str = ""
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    REQUEST_MAX_RETRIES: int = 3
    # How often the HTTP repository re-reads the profile list for subscribers
    PROFILES_POLL_INTERVAL_SECONDS: float = 5.0


settings = Settings()

APP_VERSION = __version__
