# ============================================================================
# FILE: openmusic/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "OpenMusic API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./openmusic.db"  # Change to PostgreSQL in production

    # Redis cache and export queue
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_EXPIRE_SECONDS: int = 1800
    EXPORT_QUEUE: str = "export:playlist"

    # Security
    ACCESS_TOKEN_KEY: str = "access-key-change-this-in-production"
    REFRESH_TOKEN_KEY: str = "refresh-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_AGE: int = 1800  # seconds

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Album covers
    UPLOAD_DIR: str = "./uploads/covers"
    MAX_COVER_BYTES: int = 512000

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
