"""Daily wellness survey models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field

from .common import OBSERVATION_CONFIG


class WellnessObservation(BaseModel):
    """Daily wellness survey answers for one athlete.

    Fatigue, soreness and stress are "lower is better"; motivation and
    overall feeling are "higher is better".
    """

    model_config = OBSERVATION_CONFIG

    date: Optional[date_type] = Field(None, description="Survey date")
    fatigue: int = Field(..., ge=1, le=10)
    soreness: int = Field(..., ge=1, le=10)
    stress: int = Field(..., ge=1, le=10)
    motivation: int = Field(..., ge=1, le=10)
    overall_feeling: int = Field(..., ge=1, le=10)
    sleep_quality: Optional[int] = Field(None, ge=1, le=10, description="Self-rated sleep quality 1-10")
    sleep_duration_hours: Optional[float] = Field(
        None, ge=0, le=24, description="Hours slept the night before"
    )
