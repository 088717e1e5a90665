"""Configuration management for the image metadata function."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Function settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"

    # API Configuration
    api_title: str = "Image Metadata Function"
    api_version: str = "1.0.0"
    api_description: str = "Returns metadata for the most recently created images"

    # Oracle Database Configuration
    # Required at invocation time; presence is checked by load_credentials()
    oracle_username: Optional[str] = None
    oracle_password: Optional[str] = None
    oracle_servicename: Optional[str] = None

    # OCI Object Storage Configuration (declared for the deployment, not read by the function)
    oci_bucketname: Optional[str] = None
    oci_source_region: Optional[str] = None
    oci_tenancy_name: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() in ("development", "dev")


def load_settings() -> Settings:
    """Read settings from the current environment without caching."""
    return Settings()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
