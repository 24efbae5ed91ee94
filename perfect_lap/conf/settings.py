"""Configuration settings for the telemetry analysis engine."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Process-wide settings.

    Every field can be overridden through a PERFECT_LAP_* environment
    variable or a local .env file. Analysis thresholds set here are only
    defaults: a run reads them once through AnalysisConfig.from_settings().
    """

    model_config = SettingsConfigDict(
        env_prefix="PERFECT_LAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Track layout
    track_layout: str = "cota"
    track_layouts_file: Optional[str] = None  # None = packaged track_layouts.yaml

    # Lap detection
    lap_reset_high_threshold: float = 3000.0
    lap_reset_low_threshold: float = 200.0
    min_lap_samples: int = 10  # Laps need strictly more samples than this

    # Drafting
    drafting_speed_threshold: float = 162.0

    # Zones
    braking_pressure_threshold: float = 0.3
    acceleration_throttle_threshold: float = 0.7
    acceleration_brake_ceiling: float = 0.1
    zone_debounce_samples: int = 3

    # Speed deficits
    speed_deficit_threshold: float = 5.0

    # Improvement ranking
    consistency_alert_score: float = 70.0
    max_improvement_areas: int = 8

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logs_path: str = "logs"


# Global settings instance
settings = Settings()
