"""Pytest configuration and fixtures."""

from datetime import date, timedelta
from typing import List, Optional, Sequence

import pytest

from athlete_analytics.models import NightlySleep, TrainingLoadObservation, WellnessObservation

START_DATE = date(2024, 1, 1)


@pytest.fixture
def start_date() -> date:
    return START_DATE


@pytest.fixture
def make_loads():
    """Build one session per day with the given loads, starting 2024-01-01."""

    def _make(loads: Sequence[float], start: date = START_DATE) -> List[TrainingLoadObservation]:
        return [
            TrainingLoadObservation(
                date=start + timedelta(days=i),
                perceived_exertion=5,
                duration_minutes=load / 5,
                load=load,
            )
            for i, load in enumerate(loads)
        ]

    return _make


@pytest.fixture
def make_wellness():
    """Build one survey per day; each entry is (fatigue, soreness, stress, motivation, overall)."""

    def _make(
        answers: Sequence[Sequence[int]],
        start: date = START_DATE,
        sleep_quality: Optional[int] = None,
        sleep_duration_hours: Optional[float] = None,
    ) -> List[WellnessObservation]:
        return [
            WellnessObservation(
                date=start + timedelta(days=i),
                fatigue=fatigue,
                soreness=soreness,
                stress=stress,
                motivation=motivation,
                overall_feeling=overall,
                sleep_quality=sleep_quality,
                sleep_duration_hours=sleep_duration_hours,
            )
            for i, (fatigue, soreness, stress, motivation, overall) in enumerate(answers)
        ]

    return _make


@pytest.fixture
def make_nights():
    """Build one nightly record per day from (duration_hours, quality) pairs."""

    def _make(nights: Sequence[Sequence[float]], start: date = START_DATE) -> List[NightlySleep]:
        return [
            NightlySleep(date=start + timedelta(days=i), duration=duration, quality=quality)
            for i, (duration, quality) in enumerate(nights)
        ]

    return _make
