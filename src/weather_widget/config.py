"""
Application settings.

Values come from environment variables prefixed with ``WEATHER_WIDGET_``
(or a local ``.env`` file), e.g. ``WEATHER_WIDGET_DATA_SOURCE=live``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_widget.schemas import DataMode, UnitSystem


class Settings(BaseSettings):
    """Runtime configuration for the widget, its HTTP client and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_WIDGET_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-widget"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    data_source: DataMode = DataMode.MOCK
    unit: UnitSystem = UnitSystem.CELSIUS
    default_country: str = "Canada"
    default_city: str = "Calgary"

    http_timeout: float = Field(default=30.0, gt=0)
    # Upstream calls are not retried unless explicitly configured
    http_retries: int = Field(default=0, ge=0)

    api_port: int = 8000
    site_dir: Path = Path("site")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
