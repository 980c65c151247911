"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (FILE_QUEST_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from file_quest.domains import DomainType


class OpenTelemetrySettings(BaseSettings):
    """Settings for optional tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable OpenTelemetry tracing",
    )
    service_name: str = Field(
        default="file-quest",
        description="Service name reported with every span",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (console exporter only if empty)",
    )

    model_config = {"env_prefix": "FILE_QUEST_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".file-quest",
        description="Directory for saved worlds",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    default_domain: DomainType = Field(
        default=DomainType.TECH_STARTUP,
        description="Domain used when none is given",
    )
    default_level: int = Field(
        default=1,
        ge=1,
        description="World level used when none is given",
    )
    seed: int | None = Field(
        default=None,
        description="Fixed generation seed (random if unset)",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "FILE_QUEST_"}

    def ensure_data_dir(self) -> Path:
        """Ensure data directory exists and return it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    def saves_dir(self) -> Path:
        """Get the saves directory."""
        saves = self.ensure_data_dir() / "saves"
        saves.mkdir(exist_ok=True)
        return saves


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
