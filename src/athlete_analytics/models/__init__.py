"""Input observation models supplied by the storage collaborator."""

from .common import to_camel
from .training import TrainingLoadObservation
from .wellness import WellnessObservation
from .sleep import SleepObservation, NightlySleep

__all__ = [
    "to_camel",
    "TrainingLoadObservation",
    "WellnessObservation",
    "SleepObservation",
    "NightlySleep",
]
