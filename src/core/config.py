"""
Core configuration for the Transaction Upload API.
Manages environment variables and upload backend settings.
"""
import os
from typing import Optional
from pydantic_settings import BaseSettings


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Upload backend
    upload_api_base_url: str = os.getenv("UPLOAD_API_BASE_URL", "http://localhost:3000")
    upload_endpoint_path: str = os.getenv("UPLOAD_ENDPOINT_PATH", "/api/upload")
    users_endpoint_path: str = os.getenv("USERS_ENDPOINT_PATH", "/api/users")

    # None means wait indefinitely on the backend
    upload_api_timeout_seconds: Optional[float] = _optional_float("UPLOAD_API_TIMEOUT_SECONDS")

    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Transaction Upload API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # File Upload Limits
    max_file_size_bytes: int = int(os.getenv("MAX_FILE_SIZE_BYTES", str(1024 * 1024)))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
