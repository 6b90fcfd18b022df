"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Fintrack"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/fintrack.sqlite"

    # Listing
    default_page_size: int = 20
    max_page_size: int = 100  # Hard cap, requests above it are clamped

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
