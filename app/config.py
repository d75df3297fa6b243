"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    app_name: str = "Resume Analytics Service"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Caching
    cache_ttl: int = 3600  # seconds

    # Redis Cache
    redis_url: str | None = None
    redis_tls: bool = False

    # Gemini API for AI audits
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    audit_temperature: float = 0.2

    class Config:
        env_prefix = "RESUME_ANALYTICS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
