"""Configuration settings for the athlete analytics engine."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


# __file__ = src/athlete_analytics/config.py
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class Settings(BaseSettings):
    """Engine settings loaded from ATHLETE_ANALYTICS_* environment variables."""

    log_level: str = "WARNING"

    # Default windows used by the athlete report
    load_trend_days: int = 30
    wellness_trend_days: int = 7
    wellness_completion_days: int = 30
    sleep_trend_days: int = 7

    sleep_target_hours: float = 8.0

    class Config:
        env_prefix = "ATHLETE_ANALYTICS_"
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    The root logger is left alone; handlers belong to the host application.
    """
    package_logger = logging.getLogger("athlete_analytics")
    package_logger.setLevel((level or get_settings().log_level).upper())
    return package_logger
