"""
Configuration Management

Centralized configuration using Pydantic Settings. Every value can be
overridden with a ``WAQL_``-prefixed environment variable or a ``.env`` file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """WAQL Tool settings."""

    # Query service
    waapi_url: str = "http://127.0.0.1:8090/waapi"
    waql_uri: str = "ak.wwise.core.object.get"
    info_uri: str = "ak.wwise.core.getInfo"

    # Single blocking call, no retry
    connect_timeout: float = Field(default=5.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)

    # Export
    csv_filename: str = "waql_results.csv"

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="WAQL_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def timeout(self) -> tuple:
        """Timeout pair in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)


# Global settings instance
settings = Settings()
