"""
Wellness survey scoring.

Turns the five daily survey answers into a weighted 1-10 composite, places
it in a category, flags single-metric concerns and follows the score over
time.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..models.common import lookup_field
from ..models.wellness import WellnessObservation
from ..metrics.stats import (
    TrendResult,
    classify_trend,
    linear_trend_slope,
    mean,
    percent_of_average,
    trailing_window,
)

logger = logging.getLogger(__name__)

WELLNESS_WEIGHTS = {
    "fatigue": 0.25,          # High impact on performance
    "soreness": 0.20,         # Important for injury risk
    "stress": 0.20,           # Affects recovery and performance
    "motivation": 0.15,       # Psychological readiness
    "overall_feeling": 0.20,  # General wellbeing
}

# Lower is better for these, so they are inverted (11 - value) before weighting
INVERTED_METRICS = ("fatigue", "soreness", "stress")

REQUIRED_METRICS = ("fatigue", "soreness", "stress", "motivation", "overall_feeling")

# Percent of average score per entry; below this the trend is stable
WELLNESS_TREND_THRESHOLD_PCT = 2.0

WellnessInput = Union[WellnessObservation, Mapping[str, Any]]


class WellnessCategoryName(str, Enum):
    """Wellness score bands."""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


@dataclass(frozen=True)
class WellnessCategory:
    """Band for a composite wellness score with its standing advice."""

    category: WellnessCategoryName
    color: str
    description: str
    recommendations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "color": self.color,
            "description": self.description,
            "recommendations": list(self.recommendations),
        }


# (exclusive upper bound, category); the last band is unbounded
WELLNESS_CATEGORIES = (
    (4.0, WellnessCategory(
        WellnessCategoryName.POOR,
        "#FC8181",
        "Poor wellness - High concern",
        (
            "Consider rest day or very light activity",
            "Focus on sleep and nutrition",
            "Manage stress levels",
            "Consult with coach about training load",
        ),
    )),
    (6.0, WellnessCategory(
        WellnessCategoryName.FAIR,
        "#F6AD55",
        "Fair wellness - Monitor closely",
        (
            "Reduce training intensity",
            "Prioritize recovery strategies",
            "Ensure adequate sleep",
            "Consider stress management techniques",
        ),
    )),
    (8.0, WellnessCategory(
        WellnessCategoryName.GOOD,
        "#68D391",
        "Good wellness - Normal training",
        (
            "Continue current training approach",
            "Maintain good recovery habits",
            "Monitor for any changes",
            "Keep up nutrition and hydration",
        ),
    )),
    (float("inf"), WellnessCategory(
        WellnessCategoryName.EXCELLENT,
        "#4FD1C7",
        "Excellent wellness - Optimal state",
        (
            "Great condition for training",
            "Consider progressive overload",
            "Maintain current lifestyle habits",
            "Good time for challenging workouts",
        ),
    )),
)


@dataclass
class WellnessScoreResult:
    """Composite score with its category and combined advice."""

    score: float
    category: WellnessCategoryName
    color: str
    description: str
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "category": self.category.value,
            "color": self.color,
            "description": self.description,
            "recommendations": list(self.recommendations),
        }


@dataclass
class WellnessCompletion:
    """Survey completion over a window of calendar days."""

    completion_rate: float  # Percent, 1 decimal
    completed_days: int
    total_days: int
    missed_dates: List[date] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "completion_rate": self.completion_rate,
            "completed_days": self.completed_days,
            "total_days": self.total_days,
            "missed_dates": [d.isoformat() for d in self.missed_dates],
        }


def _as_observation(observation: WellnessInput) -> WellnessObservation:
    if isinstance(observation, WellnessObservation):
        return observation
    return WellnessObservation.model_validate(observation)


def wellness_score(observation: WellnessInput) -> float:
    """
    Weighted composite wellness score on a 1-10 scale.

    Fatigue, soreness and stress are inverted (11 - value) so that every
    term reads "higher is better". The score is rounded to 2 decimals.

    Args:
        observation: Survey answers, as a model or a mapping

    Returns:
        Composite score
    """
    obs = _as_observation(observation)
    total = 0.0
    for metric, weight in WELLNESS_WEIGHTS.items():
        value = getattr(obs, metric)
        if metric in INVERTED_METRICS:
            value = 11 - value
        total += value * weight
    return round(total, 2)


def wellness_category(score: float) -> WellnessCategory:
    """Place a composite score in its band: <4 poor, <6 fair, <8 good, else excellent."""
    for upper, category in WELLNESS_CATEGORIES:
        if score < upper:
            return category
    return WELLNESS_CATEGORIES[-1][1]


def wellness_red_flags(observation: WellnessInput) -> List[str]:
    """
    Independent single-metric concerns.

    Any number of flags may fire at once, regardless of the composite score.
    """
    obs = _as_observation(observation)
    red_flags: List[str] = []

    if obs.fatigue >= 8:
        red_flags.append("High fatigue levels detected")
    if obs.soreness >= 8:
        red_flags.append("Significant muscle soreness reported")
    if obs.stress >= 8:
        red_flags.append("High stress levels detected")
    if obs.motivation <= 3:
        red_flags.append("Very low motivation reported")
    if obs.overall_feeling <= 3:
        red_flags.append("Poor overall feeling reported")
    if obs.sleep_quality is not None and obs.sleep_quality <= 4:
        red_flags.append("Poor sleep quality reported")
    if obs.sleep_duration_hours is not None and obs.sleep_duration_hours < 6:
        red_flags.append("Insufficient sleep duration")

    return red_flags


def wellness_recommendations(observation: WellnessInput) -> List[str]:
    """Metric-specific advice, plus positive reinforcement for a score of 8 or more."""
    obs = _as_observation(observation)
    recommendations: List[str] = []

    if obs.fatigue >= 7:
        recommendations.append("Consider reducing training intensity or taking a rest day")
    if obs.soreness >= 7:
        recommendations.append("Focus on recovery strategies: stretching, massage, ice baths")
    if obs.stress >= 7:
        recommendations.append("Practice stress management: meditation, breathing exercises")
    if obs.motivation <= 4:
        recommendations.append("Consider lighter, more enjoyable training activities")
    if obs.sleep_quality is not None and obs.sleep_quality <= 5:
        recommendations.append("Improve sleep hygiene: consistent bedtime, cool room, no screens")
    if obs.sleep_duration_hours is not None and obs.sleep_duration_hours < 7:
        recommendations.append("Aim for 7-9 hours of sleep per night")

    if wellness_score(obs) >= 8:
        recommendations.append("Excellent wellness state - great time for challenging training")

    return recommendations


def assess_wellness(observation: WellnessInput) -> WellnessScoreResult:
    """Score a survey and merge category advice with metric-specific advice."""
    obs = _as_observation(observation)
    score = wellness_score(obs)
    category = wellness_category(score)

    # Category advice first, then metric advice, without repeats
    recommendations = list(dict.fromkeys(
        list(category.recommendations) + wellness_recommendations(obs)
    ))

    return WellnessScoreResult(
        score=score,
        category=category.category,
        color=category.color,
        description=category.description,
        recommendations=recommendations,
    )


def wellness_trend(
    observations: Sequence[WellnessObservation],
    days: int = 7,
) -> TrendResult:
    """
    Trend of the composite score over the last ``days`` surveys.

    The regression slope is expressed as a percent of the window's average
    score; changes under 2% per entry are stable.

    Returns:
        TrendResult with magnitude as percent change per entry (1 decimal)
        and the average score (1 decimal)
    """
    window = trailing_window(observations, days)
    scores = [wellness_score(obs) for obs in window]
    average = mean(scores)

    if len(scores) < 2:
        return TrendResult(
            direction=classify_trend(0.0, WELLNESS_TREND_THRESHOLD_PCT),
            magnitude=0.0,
            average_value=round(average, 1),
        )

    change_pct = percent_of_average(linear_trend_slope(scores), average)
    direction = classify_trend(change_pct, WELLNESS_TREND_THRESHOLD_PCT)
    logger.debug(f"Wellness trend over {len(scores)} surveys: {direction.value} ({change_pct:.1f}%)")

    return TrendResult(
        direction=direction,
        magnitude=round(change_pct, 1),
        average_value=round(average, 1),
    )


def wellness_completion_rate(
    observations: Sequence[WellnessObservation],
    days: int = 30,
    as_of: Optional[date] = None,
) -> WellnessCompletion:
    """
    Share of days in a window with at least one survey.

    The window is the ``days`` calendar days ending on ``as_of`` inclusive.
    Several surveys on one day count once; undated surveys and surveys
    outside the window are ignored.

    Args:
        observations: Wellness surveys in any order
        days: Window length in calendar days
        as_of: Last day of the window (default: today)

    Returns:
        WellnessCompletion with missed dates in ascending order
    """
    end = as_of or date.today()
    window = [end - timedelta(days=offset) for offset in range(max(days, 0) - 1, -1, -1)]

    surveyed = {obs.date for obs in observations if obs.date is not None}
    completed = [day for day in window if day in surveyed]
    missed = [day for day in window if day not in surveyed]

    total = len(window)
    rate = (len(completed) / total) * 100 if total > 0 else 0.0

    return WellnessCompletion(
        completion_rate=round(rate, 1),
        completed_days=len(completed),
        total_days=total,
        missed_dates=missed,
    )


def validate_wellness_observation(entry: Mapping[str, Any]) -> List[str]:
    """
    Validate a partially filled wellness survey.

    Accepts snake_case or camelCase keys.

    Returns:
        List of error messages, empty when the survey is valid
    """
    errors: List[str] = []

    if not lookup_field(entry, "date"):
        errors.append("Date is required")

    for metric in REQUIRED_METRICS:
        value = lookup_field(entry, metric)
        if not isinstance(value, (int, float)) or value < 1 or value > 10:
            errors.append(f"{metric} must be between 1 and 10")

    sleep_duration = lookup_field(entry, "sleep_duration_hours", "sleep_duration")
    if sleep_duration is not None and (
        not isinstance(sleep_duration, (int, float)) or sleep_duration < 0 or sleep_duration > 24
    ):
        errors.append("Sleep duration must be between 0 and 24 hours")

    return errors
