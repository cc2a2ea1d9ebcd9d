"""Services composing the analyzers for the application layer."""

from .athlete_report import AthleteReport, build_athlete_report, calculate_sleep_debt

__all__ = [
    "AthleteReport",
    "build_athlete_report",
    "calculate_sleep_debt",
]
