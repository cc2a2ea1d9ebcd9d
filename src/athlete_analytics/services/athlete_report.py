"""
Athlete report combining every analyzer into one payload.

This is the entry point for the application layer: it passes in the
histories it loaded from storage and gets back everything a dashboard
needs for one athlete. No I/O happens here; window sizes come from
Settings.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from ..analysis.sleep import SleepTrend, sleep_recommendations, sleep_trend
from ..analysis.wellness import (
    WellnessCompletion,
    WellnessScoreResult,
    assess_wellness,
    wellness_completion_rate,
    wellness_red_flags,
    wellness_trend,
)
from ..config import Settings, get_settings
from ..metrics.injury_risk import LoadTrendPoint, RiskAssessment, assess_risk, load_trend_series
from ..metrics.load import ACUTE_WINDOW, WeeklyDistribution, weekly_distribution
from ..metrics.stats import TrendResult, sort_by_date, trailing_window
from ..models.sleep import NightlySleep
from ..models.training import TrainingLoadObservation
from ..models.wellness import WellnessObservation

logger = logging.getLogger(__name__)


@dataclass
class AthleteReport:
    """Everything derived for one athlete on one day."""

    subject_id: str
    as_of: date
    risk: RiskAssessment
    load_trend: List[LoadTrendPoint] = field(default_factory=list)
    weekly_load: Optional[WeeklyDistribution] = None
    wellness: Optional[WellnessScoreResult] = None
    wellness_red_flags: List[str] = field(default_factory=list)
    wellness_trend: Optional[TrendResult] = None
    wellness_completion: Optional[WellnessCompletion] = None
    sleep: Optional[SleepTrend] = None
    sleep_debt_hours: float = 0.0
    sleep_recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "subject_id": self.subject_id,
            "as_of": self.as_of.isoformat(),
            "risk": self.risk.to_dict(),
            "load_trend": [p.to_dict() for p in self.load_trend],
            "weekly_load": self.weekly_load.to_dict() if self.weekly_load else None,
            "wellness": self.wellness.to_dict() if self.wellness else None,
            "wellness_red_flags": list(self.wellness_red_flags),
            "wellness_trend": self.wellness_trend.to_dict() if self.wellness_trend else None,
            "wellness_completion": (
                self.wellness_completion.to_dict() if self.wellness_completion else None
            ),
            "sleep": self.sleep.to_dict() if self.sleep else None,
            "sleep_debt_hours": self.sleep_debt_hours,
            "sleep_recommendations": list(self.sleep_recommendations),
        }


def calculate_sleep_debt(nights: Sequence[NightlySleep], target_hours: float) -> float:
    """
    Accumulated shortfall against a nightly target.

    Nights above target do not pay back earlier debt.
    """
    return round(sum(max(0.0, target_hours - n.duration) for n in nights), 1)


def build_athlete_report(
    subject_id: str,
    training_loads: Sequence[TrainingLoadObservation],
    wellness: Sequence[WellnessObservation] = (),
    sleep: Sequence[NightlySleep] = (),
    as_of: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> AthleteReport:
    """
    Build the full report for one athlete.

    Args:
        subject_id: Athlete identifier
        training_loads: Session history
        wellness: Daily wellness surveys
        sleep: Nightly sleep records
        as_of: Report date (default: today)
        settings: Window configuration (default: cached Settings)

    Returns:
        AthleteReport. Sections without input data are left empty.
    """
    settings = settings or get_settings()
    report_date = as_of or date.today()

    report = AthleteReport(
        subject_id=subject_id,
        as_of=report_date,
        risk=assess_risk(subject_id, training_loads, report_date),
        load_trend=load_trend_series(training_loads, settings.load_trend_days),
    )

    if training_loads:
        report.weekly_load = weekly_distribution(trailing_window(training_loads, ACUTE_WINDOW))

    if wellness:
        latest = sort_by_date(wellness)[-1]
        report.wellness = assess_wellness(latest)
        report.wellness_red_flags = wellness_red_flags(latest)
        report.wellness_trend = wellness_trend(wellness, settings.wellness_trend_days)

    report.wellness_completion = wellness_completion_rate(
        wellness, settings.wellness_completion_days, report_date
    )

    if sleep:
        recent_nights = trailing_window(sleep, settings.sleep_trend_days)
        report.sleep = sleep_trend(recent_nights)
        report.sleep_debt_hours = calculate_sleep_debt(recent_nights, settings.sleep_target_hours)
        report.sleep_recommendations = sleep_recommendations(
            report.sleep.average_duration,
            report.sleep.average_quality,
        )

    logger.info(
        f"Built report for {subject_id} as of {report_date.isoformat()}: "
        f"risk={report.risk.risk_level.value}, red_flags={len(report.wellness_red_flags)}"
    )
    return report
