"""
Application settings and configuration.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Dentist Booking"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Backend REST API
    backend_url: str = Field(default="http://localhost:5001")
    request_timeout: float = Field(default=10.0)

    # Timezone used for day boundaries and display
    timezone: str = Field(default="UTC")

    # Booking history
    default_page_size: int = Field(default=5)
    page_size_options: List[int] = Field(default_factory=lambda: [5, 10, 20])
    review_success_dismiss_seconds: float = Field(default=3.0)

    # Profile editing
    profile_redirect_seconds: float = Field(default=2.0)
    profile_redirect_path: str = Field(default="/dentist/profile")

    # Logging
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
