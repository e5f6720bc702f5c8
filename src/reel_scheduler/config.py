"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote authority
    api_base_url: str = Field(
        default="http://localhost:3000/api",
        description="Base URL of the remote video store API",
    )
    remote_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for remote fetch and save requests",
    )

    # Connection monitoring
    probe_timeout_seconds: float = Field(
        default=3.0,
        description="Timeout for a single health probe",
    )
    monitor_interval_seconds: float = Field(
        default=30.0,
        description="Seconds between periodic health probes",
    )

    # Autosave
    autosave_delay_seconds: float = Field(
        default=1.0,
        description="Quiet period before coalesced mutations are saved",
    )

    # Local cache
    cache_dir: Path = Field(
        default=Path("./.reel_cache"),
        description="Directory holding the local cache slots",
    )
    cache_slot: str = Field(
        default="reelSchedulerData",
        description="Name of the local cache slot for the video collection",
    )
    data_version: str = Field(
        default="1.0.0",
        description="Version tag written with every collection snapshot",
    )

    # Reference server
    data_file: Path = Field(
        default=Path("data.json"),
        description="JSON file backing the reference remote server",
    )
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3000, description="API server port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# Convenience alias
settings = get_settings()
