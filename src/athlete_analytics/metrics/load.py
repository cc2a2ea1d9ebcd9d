"""Training load calculations (sRPE, ATL, CTL, ACWR, monotony, strain)."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence

from ..exceptions import TrainingLoadInputError
from ..models.common import lookup_field
from ..models.training import TrainingLoadObservation
from .stats import (
    TrendResult,
    classify_trend,
    linear_trend_slope,
    mean,
    percent_of_average,
    rolling_average,
    rolling_sum,
    standard_deviation,
    trailing_window,
)

logger = logging.getLogger(__name__)

ACUTE_WINDOW = 7
CHRONIC_WINDOW = 28

# Load trend is stable while the per-entry slope is within 5% of the mean load
LOAD_TREND_THRESHOLD_PCT = 5.0

RPE_DESCRIPTIONS = {
    1: "Very Easy - Minimal effort",
    2: "Easy - Light effort",
    3: "Moderate - Some effort",
    4: "Somewhat Hard - Noticeable effort",
    5: "Hard - Strong effort",
    6: "Very Hard - Heavy effort",
    7: "Very Hard+ - Very heavy effort",
    8: "Extremely Hard - Maximal sustainable effort",
    9: "Extremely Hard+ - Near maximal effort",
    10: "Maximal - Absolute maximum effort",
}


class LoadCategoryName(str, Enum):
    """Session load bands."""
    VERY_LIGHT = "very-light"
    LIGHT = "light"
    MODERATE = "moderate"
    HARD = "hard"
    VERY_HARD = "very-hard"


@dataclass(frozen=True)
class LoadCategory:
    """Display band for a single session load."""

    category: LoadCategoryName
    color: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "color": self.color,
            "description": self.description,
        }


# (exclusive upper bound, category); the last band is unbounded
LOAD_CATEGORIES = (
    (150.0, LoadCategory(LoadCategoryName.VERY_LIGHT, "#E6FFFA", "Very light training session")),
    (300.0, LoadCategory(LoadCategoryName.LIGHT, "#B2F5EA", "Light training session")),
    (450.0, LoadCategory(LoadCategoryName.MODERATE, "#4FD1C7", "Moderate training session")),
    (600.0, LoadCategory(LoadCategoryName.HARD, "#F6AD55", "Hard training session")),
    (float("inf"), LoadCategory(LoadCategoryName.VERY_HARD, "#FC8181", "Very hard training session")),
)


@dataclass
class RollingLoadSnapshot:
    """Acute and chronic load with their ratio."""

    acute_load: float  # ATL: last 7 entries / 7
    chronic_load: float  # CTL: mean of last 28 entries
    ratio: float  # ACWR, 0 when chronic load is 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "acute_load": self.acute_load,
            "chronic_load": self.chronic_load,
            "ratio": self.ratio,
        }


@dataclass
class WeeklyDistribution:
    """Totals and per-band session counts for a set of sessions."""

    total_load: float
    average_load: float
    session_count: int
    distribution: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_load": self.total_load,
            "average_load": self.average_load,
            "session_count": self.session_count,
            "distribution": dict(self.distribution),
        }


def session_load(rpe: float, duration_minutes: float) -> float:
    """
    Session RPE training load.

    sRPE = RPE x duration (minutes)

    Args:
        rpe: Rate of perceived exertion, 1-10
        duration_minutes: Session duration in minutes

    Returns:
        Session load in arbitrary units

    Raises:
        TrainingLoadInputError: If RPE is outside 1-10 or duration is negative
    """
    if rpe < 1 or rpe > 10:
        raise TrainingLoadInputError(
            f"RPE must be between 1 and 10, got {rpe}",
            field="rpe",
            details={"rpe": rpe},
        )
    if duration_minutes < 0:
        raise TrainingLoadInputError(
            f"Duration must not be negative, got {duration_minutes}",
            field="duration_minutes",
            details={"duration_minutes": duration_minutes},
        )
    return rpe * duration_minutes


def acute_load(observations: Sequence[TrainingLoadObservation]) -> float:
    """
    Acute Training Load: sum of the last 7 entries divided by 7.

    The divisor stays at 7 even when fewer entries exist, so a short
    history reads as a low acute load.
    """
    if not observations:
        return 0.0
    return rolling_sum(observations, ACUTE_WINDOW) / ACUTE_WINDOW


def chronic_load(observations: Sequence[TrainingLoadObservation]) -> float:
    """Chronic Training Load: mean of the last 28 entries (or all if fewer)."""
    return rolling_average(observations, CHRONIC_WINDOW)


def calculate_acwr(atl: float, ctl: float) -> float:
    """
    Acute:Chronic Workload Ratio.

    ACWR = ATL / CTL, rounded to 2 decimals.

    Returns:
        ACWR value, or 0.0 when CTL is 0 (no chronic history, not a risk)
    """
    if ctl == 0:
        return 0.0
    return round(atl / ctl, 2)


def rolling_load_snapshot(observations: Sequence[TrainingLoadObservation]) -> RollingLoadSnapshot:
    """Compute ATL, CTL and ACWR for an observation history."""
    atl = acute_load(observations)
    ctl = chronic_load(observations)
    snapshot = RollingLoadSnapshot(acute_load=atl, chronic_load=ctl, ratio=calculate_acwr(atl, ctl))
    logger.debug(
        f"Load snapshot over {len(observations)} sessions: "
        f"ATL={atl:.1f} CTL={ctl:.1f} ACWR={snapshot.ratio}"
    )
    return snapshot


def training_monotony(loads: Sequence[float]) -> float:
    """
    Training monotony.

    Monotony = mean(loads) / population stddev(loads)

    Returns:
        Monotony value, or 0.0 with fewer than 2 loads or zero variation
    """
    if len(loads) < 2:
        return 0.0
    std_dev = standard_deviation(loads)
    if std_dev == 0:
        return 0.0
    return mean(loads) / std_dev


def training_strain(monotony: float, total_load: float) -> float:
    """Training strain = monotony x total load."""
    return monotony * total_load


def load_category(load: float) -> LoadCategory:
    """Place a session load in its display band."""
    for upper, category in LOAD_CATEGORIES:
        if load < upper:
            return category
    return LOAD_CATEGORIES[-1][1]


def weekly_distribution(observations: Sequence[TrainingLoadObservation]) -> WeeklyDistribution:
    """Summarize total, average and per-band counts for a set of sessions."""
    total = float(sum(o.load for o in observations))
    count = len(observations)
    average = total / count if count > 0 else 0.0

    distribution: Dict[str, int] = {}
    for obs in observations:
        name = load_category(obs.load).category.value
        distribution[name] = distribution.get(name, 0) + 1

    return WeeklyDistribution(
        total_load=total,
        average_load=round(average, 1),
        session_count=count,
        distribution=distribution,
    )


def training_load_trend(
    observations: Sequence[TrainingLoadObservation],
    days: int = CHRONIC_WINDOW,
) -> TrendResult:
    """
    Direction of recent session loads.

    The slope over the last ``days`` entries is expressed as a percent of
    their mean load and classified as increasing, decreasing or stable.
    """
    window = trailing_window(observations, days)
    loads = [o.load for o in window]
    average = mean(loads)
    if len(loads) < 2:
        return _load_trend_result(0.0, average)

    change_pct = percent_of_average(linear_trend_slope(loads), average)
    return _load_trend_result(change_pct, average)


def _load_trend_result(change_pct: float, average: float) -> TrendResult:
    return TrendResult(
        direction=classify_trend(change_pct, LOAD_TREND_THRESHOLD_PCT, neutral=True),
        magnitude=round(change_pct, 1),
        average_value=round(average, 1),
    )


def validate_rpe(rpe: Any) -> List[str]:
    """Check an RPE entry, returning user-facing messages instead of raising."""
    if not isinstance(rpe, (int, float)) or rpe < 1 or rpe > 10:
        return ["RPE must be between 1 (very easy) and 10 (maximal effort)"]
    return []


def validate_training_load_entry(entry: Mapping[str, Any]) -> List[str]:
    """
    Validate a partially filled training load form.

    Accepts snake_case or camelCase keys.

    Returns:
        List of error messages, empty when the entry is valid
    """
    errors: List[str] = []

    if not lookup_field(entry, "date"):
        errors.append("Date is required")

    rpe = lookup_field(entry, "perceived_exertion", "rpe")
    errors.extend(validate_rpe(rpe))

    duration = lookup_field(entry, "duration_minutes", "duration")
    if not isinstance(duration, (int, float)) or duration < 0:
        errors.append("Duration must be zero or more minutes")

    return errors


def rpe_description(rpe: int) -> str:
    """Guidance text for an RPE value."""
    return RPE_DESCRIPTIONS.get(rpe, "Unknown")

