"""Athlete age and personal-best improvement calculations."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Union


class EventType(str, Enum):
    """How a result is measured. Lower is better only for time."""
    TIME = "time"
    DISTANCE = "distance"
    HEIGHT = "height"


@dataclass
class PerformanceImprovement:
    """Change of a result against the previous record."""

    improvement: float  # Percent, 2 decimals; positive means better
    is_improvement: bool
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "improvement": self.improvement,
            "is_improvement": self.is_improvement,
            "description": self.description,
        }


def _parse_date(date_value: Union[date, datetime, str, None]) -> Optional[date]:
    """Parse date from string or date object."""
    if date_value is None:
        return None
    if isinstance(date_value, datetime):
        return date_value.date()
    if isinstance(date_value, date):
        return date_value
    if isinstance(date_value, str):
        try:
            return datetime.strptime(date_value[:10], "%Y-%m-%d").date()
        except ValueError:
            return None
    return None


def age_from_birthdate(
    birthdate: Union[date, datetime, str, None],
    as_of: Optional[date] = None,
) -> int:
    """
    Calendar age in whole years.

    Args:
        birthdate: Date of birth, or None when unknown
        as_of: Reference date (default: today)

    Returns:
        Age in years, or 0 when the birthdate is missing or unparsable
    """
    born = _parse_date(birthdate)
    if born is None:
        return 0

    today = as_of or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def performance_improvement(
    current: float,
    previous: float,
    event_type: Union[EventType, str],
) -> PerformanceImprovement:
    """
    Percent change of a result against the previous best.

    For time events a lower result is better:
        improvement = (previous - current) / previous x 100
    For distance and height events a higher result is better:
        improvement = (current - previous) / previous x 100

    Returns:
        PerformanceImprovement; zero with "No previous record" when
        previous is 0
    """
    if previous == 0:
        return PerformanceImprovement(
            improvement=0.0,
            is_improvement=False,
            description="No previous record",
        )

    if EventType(event_type) == EventType.TIME:
        improvement = ((previous - current) / previous) * 100
        is_improvement = current < previous
    else:
        improvement = ((current - previous) / previous) * 100
        is_improvement = current > previous

    label = "improvement" if is_improvement else "decline"
    return PerformanceImprovement(
        improvement=round(improvement, 2),
        is_improvement=is_improvement,
        description=f"{abs(improvement):.1f}% {label}",
    )
