"""Wellness, sleep and performance analysis."""

from .wellness import (
    WellnessCategory,
    WellnessCategoryName,
    WellnessCompletion,
    WellnessScoreResult,
    assess_wellness,
    validate_wellness_observation,
    wellness_category,
    wellness_completion_rate,
    wellness_recommendations,
    wellness_red_flags,
    wellness_score,
    wellness_trend,
)
from .sleep import (
    SleepDuration,
    SleepQuality,
    SleepTrend,
    format_sleep_duration,
    nightly_sleep,
    sleep_duration,
    sleep_efficiency,
    sleep_quality_text,
    sleep_recommendations,
    sleep_trend,
    validate_sleep_record,
)
from .performance import (
    EventType,
    PerformanceImprovement,
    age_from_birthdate,
    performance_improvement,
)

__all__ = [
    # Wellness
    "WellnessCategory",
    "WellnessCategoryName",
    "WellnessCompletion",
    "WellnessScoreResult",
    "assess_wellness",
    "validate_wellness_observation",
    "wellness_category",
    "wellness_completion_rate",
    "wellness_recommendations",
    "wellness_red_flags",
    "wellness_score",
    "wellness_trend",
    # Sleep
    "SleepDuration",
    "SleepQuality",
    "SleepTrend",
    "format_sleep_duration",
    "nightly_sleep",
    "sleep_duration",
    "sleep_efficiency",
    "sleep_quality_text",
    "sleep_recommendations",
    "sleep_trend",
    "validate_sleep_record",
    # Performance
    "EventType",
    "PerformanceImprovement",
    "age_from_birthdate",
    "performance_improvement",
]
