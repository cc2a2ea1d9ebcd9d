"""
Sleep analysis: duration from clock times, quality labels and multi-night trends.

Bedtime and wake time are local clock times without a date. A wake time
earlier than the bedtime is read as the following morning.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..models.common import lookup_field
from ..models.sleep import NightlySleep, SleepObservation
from ..metrics.stats import (
    TrendDirection,
    classify_trend,
    linear_trend_slope,
    mean,
    standard_deviation,
    trailing_window,
)

logger = logging.getLogger(__name__)

# Absolute slope in quality levels per night; below this the trend is stable
SLEEP_QUALITY_TREND_THRESHOLD = 0.1

MIN_SLEEP_HOURS = 0.5
MAX_SLEEP_HOURS = 16.0

CLOCK_FORMATS = ("%H:%M:%S", "%H:%M")

ClockTime = Union[str, time, None]


class SleepQuality(str, Enum):
    """Text labels for the 1-4 quality scale."""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"
    UNKNOWN = "unknown"


SLEEP_QUALITY_MAPPING = {
    1: SleepQuality.POOR,
    2: SleepQuality.FAIR,
    3: SleepQuality.GOOD,
    4: SleepQuality.EXCELLENT,
}


@dataclass
class SleepDuration:
    """Length of one sleep period."""

    hours: int
    minutes: int
    total_hours: float  # Decimal hours, 2 decimals

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "total_hours": self.total_hours,
        }


@dataclass
class SleepTrend:
    """Multi-night sleep summary."""

    average_duration: float  # Hours, 2 decimals
    average_quality: float  # 1-4 scale, 1 decimal
    trend: TrendDirection  # From the slope of quality levels
    consistency_score: float  # 0-100, higher = steadier duration

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "average_duration": self.average_duration,
            "average_quality": self.average_quality,
            "trend": self.trend.value,
            "consistency_score": self.consistency_score,
        }


ZERO_DURATION = SleepDuration(hours=0, minutes=0, total_hours=0.0)


def _parse_clock(value: Union[str, time]) -> time:
    """Parse HH:MM[:SS] into a time, passing time objects through."""
    if isinstance(value, time):
        return value
    for fmt in CLOCK_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized clock time: {value!r}")


def sleep_duration(start_time: ClockTime, end_time: ClockTime) -> SleepDuration:
    """
    Length of a sleep period from bedtime and wake time.

    Both times are placed on the same day; if the wake time is earlier than
    the bedtime it is moved to the next day.

    Args:
        start_time: Bedtime as "HH:MM[:SS]" or a time
        end_time: Wake time as "HH:MM[:SS]" or a time

    Returns:
        SleepDuration; all zeros for empty or unparsable input
    """
    if not start_time or not end_time:
        return ZERO_DURATION

    try:
        start_clock = _parse_clock(start_time)
        end_clock = _parse_clock(end_time)
    except (ValueError, AttributeError) as e:
        logger.warning(f"Could not calculate sleep duration: {e}")
        return ZERO_DURATION

    day = datetime(1970, 1, 1)
    start = datetime.combine(day, start_clock)
    end = datetime.combine(day, end_clock)
    if end < start:
        end += timedelta(days=1)

    total_seconds = int((end - start).total_seconds())
    return SleepDuration(
        hours=total_seconds // 3600,
        minutes=(total_seconds % 3600) // 60,
        total_hours=round(total_seconds / 3600, 2),
    )


def sleep_quality_text(level: int) -> SleepQuality:
    """Label for a 1-4 quality level; anything else is "unknown"."""
    return SLEEP_QUALITY_MAPPING.get(level, SleepQuality.UNKNOWN)


def nightly_sleep(observation: SleepObservation) -> NightlySleep:
    """Convert a logged sleep period into a trend record."""
    duration = sleep_duration(observation.start_time, observation.end_time)
    return NightlySleep(
        date=observation.date,
        duration=duration.total_hours,
        quality=observation.quality_level,
    )


def sleep_trend(
    records: Sequence[NightlySleep],
    days: Optional[int] = None,
) -> SleepTrend:
    """
    Summarize duration, quality and consistency over recent nights.

    Args:
        records: Nightly records in any order
        days: Keep only the most recent N nights (default: all)

    Returns:
        SleepTrend. Quality direction uses an absolute slope threshold of
        0.1 levels per night. Consistency is max(0, 100 - 10 x stddev of
        duration).
    """
    window = trailing_window(records, days if days is not None else len(records))

    if not window:
        return SleepTrend(
            average_duration=0.0,
            average_quality=0.0,
            trend=TrendDirection.STABLE,
            consistency_score=0.0,
        )

    durations = [r.duration for r in window]
    qualities = [r.quality for r in window]
    average_duration = mean(durations)
    average_quality = mean(qualities)

    if len(window) < 2:
        return SleepTrend(
            average_duration=round(average_duration, 2),
            average_quality=round(average_quality, 1),
            trend=TrendDirection.STABLE,
            consistency_score=100.0,
        )

    slope = linear_trend_slope(qualities)
    consistency = max(0.0, 100 - standard_deviation(durations) * 10)

    return SleepTrend(
        average_duration=round(average_duration, 2),
        average_quality=round(average_quality, 1),
        trend=classify_trend(slope, SLEEP_QUALITY_TREND_THRESHOLD),
        consistency_score=round(consistency, 1),
    )


def sleep_efficiency(time_asleep: float, time_in_bed: float) -> float:
    """Percent of time in bed spent asleep, 1 decimal."""
    if time_in_bed == 0:
        return 0.0
    return round((time_asleep / time_in_bed) * 100, 1)


def format_sleep_duration(total_hours: float) -> str:
    """Render decimal hours as "Xh Ym"."""
    if not total_hours:
        return "0h 0m"
    hours = int(total_hours)
    minutes = round((total_hours - hours) * 60)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return f"{hours}h {minutes}m"


def sleep_recommendations(average_duration: float, average_quality: float) -> List[str]:
    """Advice from average nightly duration (hours) and quality (1-4)."""
    recommendations: List[str] = []

    if average_duration < 7:
        recommendations.append("Aim for 7-9 hours of sleep per night")
    if average_duration > 9:
        recommendations.append("Consider if you might be oversleeping - 7-9 hours is optimal")
    if average_quality < 2.5:
        recommendations.append(
            "Focus on sleep hygiene: consistent bedtime, cool room, no screens before bed"
        )
        recommendations.append("Consider consulting a healthcare provider about sleep quality")
    if average_quality >= 3.5:
        recommendations.append("Excellent sleep quality - keep up the good habits!")

    return recommendations


def validate_sleep_record(record: Mapping[str, Any]) -> List[str]:
    """
    Validate a sleep log form.

    Accepts snake_case or camelCase keys (start_time, end_time, date and
    quality_level or quality).

    Returns:
        List of error messages, empty when the record is valid
    """
    errors: List[str] = []

    start_time = lookup_field(record, "start_time")
    end_time = lookup_field(record, "end_time")

    if not start_time:
        errors.append("Start time is required")
    if not end_time:
        errors.append("End time is required")
    if not lookup_field(record, "date"):
        errors.append("Date is required")

    quality = lookup_field(record, "quality_level", "quality")
    if not isinstance(quality, (int, float)) or quality < 1 or quality > 4:
        errors.append("Sleep quality must be between 1 (poor) and 4 (excellent)")

    if start_time and end_time:
        duration = sleep_duration(start_time, end_time)
        if duration.total_hours > MAX_SLEEP_HOURS:
            errors.append("Sleep duration cannot exceed 16 hours")
        if duration.total_hours < MIN_SLEEP_HOURS:
            errors.append("Sleep duration must be at least 30 minutes")

    return errors
