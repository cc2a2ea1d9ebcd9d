"""Training load observation models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field

from .common import OBSERVATION_CONFIG


class TrainingLoadObservation(BaseModel):
    """A single logged training session and its sRPE load."""

    model_config = OBSERVATION_CONFIG

    date: date_type = Field(..., description="Calendar day of the session")
    perceived_exertion: int = Field(..., ge=1, le=10, description="Session RPE (1-10)")
    duration_minutes: float = Field(..., ge=0, description="Session duration in minutes")
    load: float = Field(..., ge=0, description="Session load (RPE x minutes)")
    workout_category: Optional[str] = Field(None, description="Optional workout label")

    @classmethod
    def from_session(
        cls,
        date: date_type,
        rpe: int,
        duration_minutes: float,
        workout_category: Optional[str] = None,
    ) -> "TrainingLoadObservation":
        """Create an observation, deriving load from RPE and duration.

        Raises:
            TrainingLoadInputError: If RPE is outside 1-10 or duration is negative.
        """
        from ..metrics.load import session_load

        return cls(
            date=date,
            perceived_exertion=rpe,
            duration_minutes=duration_minutes,
            load=session_load(rpe, duration_minutes),
            workout_category=workout_category,
        )
