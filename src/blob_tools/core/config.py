"""Configuration management for blob-tools."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "blob-tools"
    default_region: str = "us-east-1"

    model_config = {
        "env_prefix": "BLOB_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
