"""Injury risk assessment from the Acute:Chronic Workload Ratio.

Zones follow the ACWR research of Gabbett (2016) and others:
- < 0.8: Undertraining (low risk, detraining possible)
- 0.8 - 1.3: Optimal (sweet spot for adaptation)
- 1.3 - 1.5: Elevated risk
- 1.5 - 2.0: High risk
- >= 2.0: Very high risk

Every zone is half-open, [min, max), so a ratio on a boundary belongs to the
higher zone.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import RiskRatioError
from ..models.training import TrainingLoadObservation
from .load import acute_load, calculate_acwr, chronic_load
from .stats import sort_by_date

logger = logging.getLogger(__name__)


class RiskLevel(str, Enum):
    """Injury risk level."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


# Ordering used when ranking athletes by risk
RISK_SEVERITY = {
    RiskLevel.LOW: 0,
    RiskLevel.MODERATE: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.VERY_HIGH: 3,
}


@dataclass(frozen=True)
class RiskZone:
    """One band of the ACWR axis."""

    min: float
    max: float
    level: RiskLevel
    color: str
    description: str
    recommendations: Tuple[str, ...]

    def contains(self, ratio: float) -> bool:
        return self.min <= ratio < self.max


RISK_ZONES: Tuple[RiskZone, ...] = (
    RiskZone(
        min=0.0,
        max=0.8,
        level=RiskLevel.LOW,
        color="green",
        description="Undertraining - Low injury risk but potential for detraining",
        recommendations=(
            "Consider gradually increasing training load",
            "Monitor for signs of detraining",
            "Ensure adequate training stimulus",
        ),
    ),
    RiskZone(
        min=0.8,
        max=1.3,
        level=RiskLevel.LOW,
        color="green",
        description="Optimal training zone - Lowest injury risk",
        recommendations=(
            "Maintain current training approach",
            "Continue monitoring wellness metrics",
            "Good balance of training and recovery",
        ),
    ),
    RiskZone(
        min=1.3,
        max=1.5,
        level=RiskLevel.MODERATE,
        color="yellow",
        description="Elevated risk - Monitor closely",
        recommendations=(
            "Monitor wellness metrics closely",
            "Consider reducing training intensity",
            "Prioritize recovery strategies",
            "Ensure adequate sleep and nutrition",
        ),
    ),
    RiskZone(
        min=1.5,
        max=2.0,
        level=RiskLevel.HIGH,
        color="orange",
        description="High injury risk - Immediate attention needed",
        recommendations=(
            "Reduce training load immediately",
            "Increase recovery time between sessions",
            "Consider rest day or active recovery",
            "Consult with sports medicine professional",
        ),
    ),
    RiskZone(
        min=2.0,
        max=math.inf,
        level=RiskLevel.VERY_HIGH,
        color="red",
        description="Very high injury risk - Critical intervention required",
        recommendations=(
            "Immediate training load reduction required",
            "Extended recovery period recommended",
            "Medical evaluation advised",
            "Review training program with coach",
        ),
    ),
)


@dataclass
class RiskAssessment:
    """Injury risk assessment for one athlete on one day."""

    subject_id: str
    date: date
    ratio: float  # ACWR, 2 decimals
    acute_load: float  # ATL, 1 decimal
    chronic_load: float  # CTL, 1 decimal
    risk_level: RiskLevel
    risk_color: str
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "subject_id": self.subject_id,
            "date": self.date.isoformat(),
            "ratio": self.ratio,
            "acute_load": self.acute_load,
            "chronic_load": self.chronic_load,
            "risk_level": self.risk_level.value,
            "risk_color": self.risk_color,
            "recommendations": list(self.recommendations),
        }


@dataclass
class LoadTrendPoint:
    """ATL, CTL and ACWR as they stood after one logged session."""

    date: date
    acute_load: float
    chronic_load: float
    ratio: float
    risk_level: RiskLevel

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "date": self.date.isoformat(),
            "acute_load": self.acute_load,
            "chronic_load": self.chronic_load,
            "ratio": self.ratio,
            "risk_level": self.risk_level.value,
        }


def risk_zone_for(ratio: float) -> RiskZone:
    """
    Find the risk zone containing an ACWR value.

    Args:
        ratio: Acute:Chronic Workload Ratio

    Returns:
        The single zone with min <= ratio < max

    Raises:
        RiskRatioError: For negative or NaN ratios, which no zone covers
    """
    for zone in RISK_ZONES:
        if zone.contains(ratio):
            return zone
    raise RiskRatioError(ratio)


def assess_risk(
    subject_id: str,
    observations: Sequence[TrainingLoadObservation],
    as_of: Optional[date] = None,
) -> RiskAssessment:
    """
    Build a risk assessment from an athlete's load history.

    Args:
        subject_id: Athlete identifier, passed through
        observations: Training load history in any order
        as_of: Assessment date (default: today)

    Returns:
        RiskAssessment with ATL/CTL rounded to 1 decimal and ACWR to 2
    """
    atl = acute_load(observations)
    ctl = chronic_load(observations)
    ratio = calculate_acwr(atl, ctl)
    zone = risk_zone_for(ratio)

    assessment = RiskAssessment(
        subject_id=subject_id,
        date=as_of or date.today(),
        ratio=ratio,
        acute_load=round(atl, 1),
        chronic_load=round(ctl, 1),
        risk_level=zone.level,
        risk_color=zone.color,
        recommendations=list(zone.recommendations),
    )
    logger.debug(f"Risk for {subject_id}: ACWR={ratio} level={zone.level.value}")
    return assessment


def load_trend_series(
    observations: Sequence[TrainingLoadObservation],
    days: int = 30,
) -> List[LoadTrendPoint]:
    """
    Replay ATL/CTL/ACWR after each session and return the last ``days`` points.

    Each point is recomputed from the history up to and including that
    session.
    """
    ordered = sort_by_date(observations)
    points: List[LoadTrendPoint] = []

    for i, obs in enumerate(ordered):
        history = ordered[: i + 1]
        atl = acute_load(history)
        ctl = chronic_load(history)
        ratio = calculate_acwr(atl, ctl)
        points.append(
            LoadTrendPoint(
                date=obs.date,
                acute_load=round(atl, 1),
                chronic_load=round(ctl, 1),
                ratio=ratio,
                risk_level=risk_zone_for(ratio).level,
            )
        )

    if days <= 0:
        return []
    return points[-days:]


def team_risk_overview(assessments: Iterable[RiskAssessment]) -> List[RiskAssessment]:
    """
    Rank athletes for a coach's roster view.

    Keeps the latest assessment per subject, then orders by descending risk
    level and, within a level, by descending ratio.
    """
    latest: Dict[str, RiskAssessment] = {}
    for assessment in assessments:
        current = latest.get(assessment.subject_id)
        if current is None or assessment.date >= current.date:
            latest[assessment.subject_id] = assessment

    return sorted(
        latest.values(),
        key=lambda a: (RISK_SEVERITY[a.risk_level], a.ratio),
        reverse=True,
    )
