"""Training metrics calculations."""

from .stats import (
    TrendDirection,
    TrendResult,
    classify_trend,
    linear_trend_slope,
    rolling_average,
    rolling_sum,
    sort_by_date,
    standard_deviation,
)
from .load import (
    LoadCategory,
    LoadCategoryName,
    RollingLoadSnapshot,
    WeeklyDistribution,
    acute_load,
    calculate_acwr,
    chronic_load,
    load_category,
    rolling_load_snapshot,
    rpe_description,
    session_load,
    training_load_trend,
    training_monotony,
    training_strain,
    validate_rpe,
    validate_training_load_entry,
    weekly_distribution,
)
from .injury_risk import (
    RISK_ZONES,
    LoadTrendPoint,
    RiskAssessment,
    RiskLevel,
    RiskZone,
    assess_risk,
    load_trend_series,
    risk_zone_for,
    team_risk_overview,
)

__all__ = [
    # Shared statistics
    "TrendDirection",
    "TrendResult",
    "classify_trend",
    "linear_trend_slope",
    "rolling_average",
    "rolling_sum",
    "sort_by_date",
    "standard_deviation",
    # Training load
    "LoadCategory",
    "LoadCategoryName",
    "RollingLoadSnapshot",
    "WeeklyDistribution",
    "acute_load",
    "calculate_acwr",
    "chronic_load",
    "load_category",
    "rolling_load_snapshot",
    "rpe_description",
    "session_load",
    "training_load_trend",
    "training_monotony",
    "training_strain",
    "validate_rpe",
    "validate_training_load_entry",
    "weekly_distribution",
    # Injury risk
    "RISK_ZONES",
    "LoadTrendPoint",
    "RiskAssessment",
    "RiskLevel",
    "RiskZone",
    "assess_risk",
    "load_trend_series",
    "risk_zone_for",
    "team_risk_overview",
]
