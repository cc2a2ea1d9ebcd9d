"""Sleep log models."""

from datetime import date as date_type, time
from typing import Optional

from pydantic import BaseModel, Field

from .common import OBSERVATION_CONFIG


class SleepObservation(BaseModel):
    """One logged sleep period, given as local clock times.

    An end time earlier than the start time means the period ended on the
    following calendar day.
    """

    model_config = OBSERVATION_CONFIG

    date: date_type = Field(..., description="Date the sleep period is logged against")
    start_time: time = Field(..., description="Bedtime (local clock time)")
    end_time: time = Field(..., description="Wake time (local clock time)")
    quality_level: int = Field(..., ge=1, le=4, description="1 poor, 2 fair, 3 good, 4 excellent")
    notes: Optional[str] = None


class NightlySleep(BaseModel):
    """Per-night record used for sleep trend analysis."""

    model_config = OBSERVATION_CONFIG

    date: date_type
    duration: float = Field(..., ge=0, description="Hours slept")
    quality: float = Field(..., description="Quality level, 1-4 scale")
