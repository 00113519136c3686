"""
Forwarding gateway configuration settings.

Upstream endpoint, request timeout and the location of query documents.

Dependencies: pydantic, pydantic_settings
System role: Client-side configuration for the forwarding gateway
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from userdir.configs.base import BaseSettings


class GatewaySettings(BaseSettings):
    """Forwarding gateway configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GATEWAY_",
        case_sensitive=False,
        extra="ignore",
    )

    upstream_url: str = Field(
        default="http://localhost:8000/api/v1/query",
        description="Directory query endpoint the gateway forwards to",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout for upstream calls",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Directory of *.graphql documents (defaults to the shipped set)",
    )
