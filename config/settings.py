"""Centralized configuration using pydantic-settings. All values are env-configurable."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WEATHER_")

    # Source
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    request_timeout_sec: float = 10.0

    # Ingestion
    fetch_interval_ms: int = 1000  # pause between successive city fetches

    # Analysis
    analysis_min_samples: int = 5
    trend_window_size: int = 10
    recommendation_trend_window: int = 5
    trend_threshold: float = 2.0

    # Monitoring
    log_level: str = "INFO"
