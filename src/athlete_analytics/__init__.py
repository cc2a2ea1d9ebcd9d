"""Sports-science analytics: training load, injury risk, wellness and sleep."""

from athlete_analytics.exceptions import (
    AnalyticsError,
    ErrorCode,
    RiskRatioError,
    TrainingLoadInputError,
    ValidationError,
)
from athlete_analytics.models import (
    NightlySleep,
    SleepObservation,
    TrainingLoadObservation,
    WellnessObservation,
)
from athlete_analytics.metrics import (
    RISK_ZONES,
    LoadCategory,
    LoadTrendPoint,
    RiskAssessment,
    RiskLevel,
    RiskZone,
    RollingLoadSnapshot,
    TrendDirection,
    TrendResult,
    WeeklyDistribution,
    acute_load,
    assess_risk,
    calculate_acwr,
    chronic_load,
    linear_trend_slope,
    load_category,
    load_trend_series,
    risk_zone_for,
    rolling_average,
    rolling_load_snapshot,
    session_load,
    standard_deviation,
    team_risk_overview,
    training_monotony,
    training_strain,
    weekly_distribution,
)
from athlete_analytics.analysis import (
    EventType,
    SleepDuration,
    SleepTrend,
    WellnessCompletion,
    WellnessScoreResult,
    age_from_birthdate,
    assess_wellness,
    performance_improvement,
    sleep_duration,
    sleep_quality_text,
    sleep_recommendations,
    sleep_trend,
    validate_sleep_record,
    validate_wellness_observation,
    wellness_category,
    wellness_completion_rate,
    wellness_recommendations,
    wellness_red_flags,
    wellness_score,
    wellness_trend,
)
from athlete_analytics.services import AthleteReport, build_athlete_report

__version__ = "0.1.0"

__all__ = [
    # Errors
    "AnalyticsError",
    "ErrorCode",
    "RiskRatioError",
    "TrainingLoadInputError",
    "ValidationError",
    # Observations
    "NightlySleep",
    "SleepObservation",
    "TrainingLoadObservation",
    "WellnessObservation",
    # Load and risk
    "RISK_ZONES",
    "LoadCategory",
    "LoadTrendPoint",
    "RiskAssessment",
    "RiskLevel",
    "RiskZone",
    "RollingLoadSnapshot",
    "TrendDirection",
    "TrendResult",
    "WeeklyDistribution",
    "acute_load",
    "assess_risk",
    "calculate_acwr",
    "chronic_load",
    "linear_trend_slope",
    "load_category",
    "load_trend_series",
    "risk_zone_for",
    "rolling_average",
    "rolling_load_snapshot",
    "session_load",
    "standard_deviation",
    "team_risk_overview",
    "training_monotony",
    "training_strain",
    "weekly_distribution",
    # Wellness, sleep, performance
    "EventType",
    "SleepDuration",
    "SleepTrend",
    "WellnessCompletion",
    "WellnessScoreResult",
    "age_from_birthdate",
    "assess_wellness",
    "performance_improvement",
    "sleep_duration",
    "sleep_quality_text",
    "sleep_recommendations",
    "sleep_trend",
    "validate_sleep_record",
    "validate_wellness_observation",
    "wellness_category",
    "wellness_completion_rate",
    "wellness_recommendations",
    "wellness_red_flags",
    "wellness_score",
    "wellness_trend",
    # Report
    "AthleteReport",
    "build_athlete_report",
]
