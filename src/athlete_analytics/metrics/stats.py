"""Shared statistics for every analyzer: rolling windows and trend slopes.

Rolling windows are defined by the count of most recent entries, not by
calendar days. When logging has gaps the window still reaches back for the
last N entries regardless of elapsed time.
"""

import statistics
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


class TrendDirection(str, Enum):
    """Direction of a trend. Which pair applies depends on metric polarity."""
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
    INCREASING = "increasing"
    DECREASING = "decreasing"


@dataclass
class TrendResult:
    """Trend classification shared by wellness, sleep and load trends."""

    direction: TrendDirection
    magnitude: float  # Percent change or absolute slope, depending on metric
    average_value: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "direction": self.direction.value,
            "magnitude": self.magnitude,
            "average_value": self.average_value,
        }


def sort_by_date(observations: Iterable[T]) -> List[T]:
    """Return observations sorted ascending by their ``date`` attribute.

    The sort is stable, so entries sharing a date keep their input order.
    Entries without a date sort first.
    """
    return sorted(observations, key=lambda o: getattr(o, "date", None) or date.min)


def trailing_window(observations: Iterable[T], window_size: int) -> List[T]:
    """Sort by date and keep the last ``window_size`` entries (all if fewer)."""
    ordered = sort_by_date(observations)
    if window_size <= 0:
        return []
    return ordered[-window_size:]


def rolling_sum(
    observations: Iterable[Any],
    window_size: int,
    field: str = "load",
) -> float:
    """Sum ``field`` over the trailing ``window_size`` entries."""
    return float(sum(getattr(o, field) for o in trailing_window(observations, window_size)))


def rolling_average(
    observations: Iterable[Any],
    window_size: int,
    field: str = "load",
) -> float:
    """Arithmetic mean of ``field`` over the trailing ``window_size`` entries.

    Args:
        observations: Dated records, in any order
        window_size: Number of most recent entries to include
        field: Attribute holding the value to average

    Returns:
        Mean of the window, or 0.0 for an empty series
    """
    window = trailing_window(observations, window_size)
    if not window:
        return 0.0
    return sum(getattr(o, field) for o in window) / len(window)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return statistics.fmean(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation (divides by n), 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return statistics.pstdev(values)


def linear_trend_slope(values: Sequence[float]) -> float:
    """
    Ordinary least-squares slope of ``values`` against index positions 0..n-1.

    Calendar dates are not used; consecutive entries are one step apart.

    Args:
        values: Series in chronological order

    Returns:
        Slope per entry, or 0.0 when fewer than 2 points exist
    """
    n = len(values)
    if n < 2:
        return 0.0

    sum_x = n * (n - 1) / 2
    sum_y = sum(values)
    sum_xy = sum(i * v for i, v in enumerate(values))
    sum_xx = n * (n - 1) * (2 * n - 1) / 6

    return (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)


def classify_trend(
    magnitude: float,
    threshold: float,
    neutral: bool = False,
) -> TrendDirection:
    """
    Classify a signed trend magnitude against a stability threshold.

    Args:
        magnitude: Signed slope or percent change
        threshold: Magnitudes with absolute value below this are stable
        neutral: Use increasing/decreasing labels for metrics where
            neither direction is better (e.g. training load)

    Returns:
        TrendDirection
    """
    if abs(magnitude) < threshold:
        return TrendDirection.STABLE
    if neutral:
        return TrendDirection.INCREASING if magnitude > 0 else TrendDirection.DECREASING
    return TrendDirection.IMPROVING if magnitude > 0 else TrendDirection.DECLINING


def percent_of_average(slope: float, average: float) -> float:
    """Express a slope as a percentage of the series average (0.0 if the average is 0)."""
    if average == 0:
        return 0.0
    return (slope / average) * 100
