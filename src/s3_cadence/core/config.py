"""Configuration management for s3-cadence."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "s3-cadence"
    max_pages: Optional[int] = None

    model_config = {
        "env_prefix": "S3_CADENCE_",
        "case_sensitive": False,
    }


settings = Settings()
