"""
Configuration management for the WordWise analysis service.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings and configuration."""

    # Application Info
    app_name: str = "WordWise Analysis Service"
    app_version: str = "2.0.0"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    otlp_endpoint: Optional[str] = Field(default=None, description="OTLP gRPC endpoint for trace export")

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    # Analysis limits and defaults
    max_text_length: int = 10000
    default_target_level: str = "high-school"
    reading_words_per_minute: int = 200

    # Build Information
    build_timestamp: Optional[str] = None
    build_version: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Initialize build info
settings.build_timestamp = datetime.now().isoformat()
settings.build_version = f"v{settings.app_version}-{int(datetime.now().timestamp())}"
