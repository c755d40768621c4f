"""
Configuration management for JobNest.
"""

from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Database
    database_url: str = "sqlite:///./jobnest.db"

    # Auth
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    # API
    cors_origins: str = "http://localhost:5173"
    auth_rate_limit: str = "10/minute"
    message_rate_limit: str = "60/minute"

    # Job listing
    default_page_size: int = 10
    max_page_size: int = 100

    rate_limit_enabled: bool = True

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
