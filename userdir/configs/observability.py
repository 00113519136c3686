"""
Observability configuration settings.

Settings for correlation ID propagation and logging.

Dependencies: pydantic_settings
System role: Observability configuration for tracing and logging
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class ObservabilitySettings(BaseSettings):
    """Observability configuration for correlation and logging."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVABILITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    correlation_header: str = Field(
        default="X-Correlation-ID",
        description="HTTP header carrying the correlation ID",
    )
