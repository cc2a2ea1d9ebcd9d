"""Tests for wellness survey scoring."""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from athlete_analytics.analysis.wellness import (
    WellnessCategoryName,
    assess_wellness,
    validate_wellness_observation,
    wellness_category,
    wellness_completion_rate,
    wellness_recommendations,
    wellness_red_flags,
    wellness_score,
    wellness_trend,
)
from athlete_analytics.metrics.stats import TrendDirection
from athlete_analytics.models import WellnessObservation

BEST = (1, 1, 1, 10, 10)
WORST = (10, 10, 10, 1, 1)
NEUTRAL = (5, 5, 5, 5, 5)


def survey(fatigue, soreness, stress, motivation, overall_feeling, **extra):
    return WellnessObservation(
        fatigue=fatigue,
        soreness=soreness,
        stress=stress,
        motivation=motivation,
        overall_feeling=overall_feeling,
        **extra,
    )


class TestWellnessScore:
    """Tests for the weighted composite."""

    def test_weighted_example(self):
        """7x0.25 + 8x0.20 + 6x0.20 + 8x0.15 + 7x0.20 = 7.15."""
        assert wellness_score(survey(4, 3, 5, 8, 7)) == 7.15

    def test_camel_case_mapping(self):
        """A raw survey payload scores the same as the model."""
        payload = {"fatigue": 4, "soreness": 3, "stress": 5, "motivation": 8, "overallFeeling": 7}
        assert wellness_score(payload) == 7.15

    def test_best_answers(self):
        assert wellness_score(survey(*BEST)) == 10.0

    def test_worst_answers(self):
        assert wellness_score(survey(*WORST)) == 1.0

    def test_out_of_range_answer_rejected(self):
        with pytest.raises(PydanticValidationError):
            survey(11, 3, 5, 8, 7)


class TestWellnessCategory:
    """Tests for score bands."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (1.0, WellnessCategoryName.POOR),
            (3.9, WellnessCategoryName.POOR),
            (4.0, WellnessCategoryName.FAIR),
            (5.99, WellnessCategoryName.FAIR),
            (6.0, WellnessCategoryName.GOOD),
            (7.15, WellnessCategoryName.GOOD),
            (8.0, WellnessCategoryName.EXCELLENT),
            (8.5, WellnessCategoryName.EXCELLENT),
        ],
    )
    def test_bands(self, score, expected):
        assert wellness_category(score).category == expected

    def test_band_display_data(self):
        category = wellness_category(9.0)
        assert category.color == "#4FD1C7"
        assert category.description.startswith("Excellent")
        assert len(category.recommendations) == 4


class TestRedFlags:
    """Tests for single-metric concerns."""

    def test_no_flags_for_neutral_survey(self):
        assert wellness_red_flags(survey(*NEUTRAL)) == []

    def test_all_flags_fire_together(self):
        """Flags are independent; all seven can fire at once."""
        flags = wellness_red_flags(
            survey(8, 8, 8, 3, 3, sleep_quality=4, sleep_duration_hours=5.5)
        )
        assert flags == [
            "High fatigue levels detected",
            "Significant muscle soreness reported",
            "High stress levels detected",
            "Very low motivation reported",
            "Poor overall feeling reported",
            "Poor sleep quality reported",
            "Insufficient sleep duration",
        ]

    def test_flags_fire_on_good_composite(self):
        """A good overall score does not suppress a flag."""
        obs = survey(8, 1, 1, 10, 10)
        assert wellness_score(obs) >= 8
        assert wellness_red_flags(obs) == ["High fatigue levels detected"]

    def test_missing_sleep_fields_never_flag(self):
        flags = wellness_red_flags(survey(*NEUTRAL))
        assert "Poor sleep quality reported" not in flags
        assert "Insufficient sleep duration" not in flags


class TestRecommendations:
    """Tests for metric advice and the combined assessment."""

    def test_best_survey_only_gets_reinforcement(self):
        assert wellness_recommendations(survey(*BEST)) == [
            "Excellent wellness state - great time for challenging training"
        ]

    def test_metric_advice(self):
        recs = wellness_recommendations(
            survey(7, 7, 7, 4, 5, sleep_quality=5, sleep_duration_hours=6.5)
        )
        assert len(recs) == 6
        assert "Aim for 7-9 hours of sleep per night" in recs

    def test_assess_wellness(self):
        result = assess_wellness(survey(4, 3, 5, 8, 7))
        assert result.score == 7.15
        assert result.category == WellnessCategoryName.GOOD
        assert result.color == "#68D391"
        assert result.recommendations[0] == "Continue current training approach"

    def test_assess_wellness_category_advice_first(self):
        result = assess_wellness(survey(*BEST))
        assert result.recommendations[:4] == list(wellness_category(10.0).recommendations)
        assert result.recommendations[-1].startswith("Excellent wellness state")
        assert result.to_dict()["category"] == "excellent"


class TestWellnessTrend:
    """Tests for the composite score trend."""

    def test_improving(self, make_wellness):
        """Overall feeling rising 2 -> 10 with other answers fixed."""
        surveys = make_wellness([(5, 5, 5, 5, v) for v in (2, 4, 6, 8, 10)])
        trend = wellness_trend(surveys)
        assert trend.direction == TrendDirection.IMPROVING
        assert trend.magnitude > 2.0
        assert 5.8 <= trend.average_value <= 5.9

    def test_declining(self, make_wellness):
        surveys = make_wellness([(5, 5, 5, 5, v) for v in (10, 8, 6, 4, 2)])
        trend = wellness_trend(surveys)
        assert trend.direction == TrendDirection.DECLINING
        assert trend.magnitude < -2.0

    def test_stable(self, make_wellness):
        trend = wellness_trend(make_wellness([NEUTRAL] * 5))
        assert trend.direction == TrendDirection.STABLE
        assert trend.magnitude == 0.0

    def test_single_survey(self, make_wellness):
        trend = wellness_trend(make_wellness([BEST]))
        assert trend.direction == TrendDirection.STABLE
        assert trend.magnitude == 0.0
        assert trend.average_value == 10.0

    def test_empty(self):
        trend = wellness_trend([])
        assert trend.direction == TrendDirection.STABLE
        assert trend.average_value == 0.0

    def test_window_uses_latest_surveys(self, make_wellness):
        """Only the last ``days`` surveys are scored."""
        surveys = make_wellness([WORST] * 7 + [BEST] * 3)
        trend = wellness_trend(list(reversed(surveys)), days=3)
        assert trend.direction == TrendDirection.STABLE
        assert trend.average_value == 10.0

    def test_same_input_same_output(self, make_wellness):
        """Repeated calls on the same input agree."""
        surveys = list(reversed(make_wellness([BEST, WORST, NEUTRAL, (4, 3, 5, 8, 7)] * 3)))
        assert wellness_trend(surveys, days=7) == wellness_trend(surveys, days=7)


class TestWellnessValidation:
    """Tests for soft survey validation."""

    def test_valid_survey(self):
        entry = {
            "date": "2024-01-01",
            "fatigue": 4,
            "soreness": 3,
            "stress": 5,
            "motivation": 8,
            "overallFeeling": 7,
        }
        assert validate_wellness_observation(entry) == []

    def test_empty_survey(self):
        errors = validate_wellness_observation({})
        assert errors[0] == "Date is required"
        assert len(errors) == 6
        assert "overall_feeling must be between 1 and 10" in errors

    def test_out_of_range_metric(self):
        entry = {
            "date": "2024-01-01",
            "fatigue": 0,
            "soreness": 3,
            "stress": 5,
            "motivation": 8,
            "overall_feeling": 7,
        }
        assert validate_wellness_observation(entry) == ["fatigue must be between 1 and 10"]

    def test_sleep_duration_range(self):
        entry = {
            "date": "2024-01-01",
            "fatigue": 4,
            "soreness": 3,
            "stress": 5,
            "motivation": 8,
            "overall_feeling": 7,
            "sleepDurationHours": 25,
        }
        assert validate_wellness_observation(entry) == [
            "Sleep duration must be between 0 and 24 hours"
        ]

    @pytest.mark.parametrize("sleep_duration", ["7.5", [7.5], "long"])
    def test_non_numeric_sleep_duration(self, sleep_duration):
        """Malformed form values become messages, never exceptions."""
        entry = {
            "date": "2024-01-01",
            "fatigue": 4,
            "soreness": 3,
            "stress": 5,
            "motivation": 8,
            "overall_feeling": 7,
            "sleepDuration": sleep_duration,
        }
        assert validate_wellness_observation(entry) == [
            "Sleep duration must be between 0 and 24 hours"
        ]

    def test_non_numeric_metric(self):
        entry = {
            "date": "2024-01-01",
            "fatigue": "4",
            "soreness": 3,
            "stress": 5,
            "motivation": None,
            "overall_feeling": 7,
        }
        assert validate_wellness_observation(entry) == [
            "fatigue must be between 1 and 10",
            "motivation must be between 1 and 10",
        ]


class TestWellnessCompletionRate:
    """Tests for survey completion over a calendar window."""

    def test_missed_days_at_end_of_window(self, make_wellness):
        """Surveys on Jan 1-5, window Jan 1-7: 5 of 7 days."""
        surveys = make_wellness([NEUTRAL] * 5)
        completion = wellness_completion_rate(list(reversed(surveys)), days=7, as_of=date(2024, 1, 7))

        assert completion.completed_days == 5
        assert completion.total_days == 7
        assert completion.completion_rate == 71.4
        assert completion.missed_dates == [date(2024, 1, 6), date(2024, 1, 7)]

    def test_gaps_inside_window(self, make_wellness):
        surveys = make_wellness([NEUTRAL] * 4)
        gapped = [surveys[0], surveys[3]]
        completion = wellness_completion_rate(gapped, days=4, as_of=date(2024, 1, 4))
        assert completion.completion_rate == 50.0
        assert completion.missed_dates == [date(2024, 1, 2), date(2024, 1, 3)]

    def test_duplicate_surveys_count_once(self, make_wellness):
        surveys = make_wellness([NEUTRAL, NEUTRAL], start=date(2024, 1, 1))
        duplicate = surveys[0].model_copy(update={"date": date(2024, 1, 2)})
        completion = wellness_completion_rate(surveys + [duplicate], days=2, as_of=date(2024, 1, 2))
        assert completion.completed_days == 2
        assert completion.completion_rate == 100.0
        assert completion.missed_dates == []

    def test_surveys_outside_window_ignored(self, make_wellness):
        surveys = make_wellness([NEUTRAL] * 5)
        completion = wellness_completion_rate(surveys, days=7, as_of=date(2024, 1, 30))
        assert completion.completed_days == 0
        assert completion.completion_rate == 0.0
        assert len(completion.missed_dates) == 7

    def test_undated_surveys_ignored(self):
        completion = wellness_completion_rate([survey(*NEUTRAL)], days=3, as_of=date(2024, 1, 3))
        assert completion.completed_days == 0

    def test_empty_history(self):
        completion = wellness_completion_rate([], days=3, as_of=date(2024, 1, 3))
        assert completion.completion_rate == 0.0
        assert completion.total_days == 3
        assert completion.missed_dates == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_zero_day_window(self, make_wellness):
        completion = wellness_completion_rate(make_wellness([NEUTRAL]), days=0, as_of=date(2024, 1, 1))
        assert completion.total_days == 0
        assert completion.completion_rate == 0.0

    def test_to_dict(self, make_wellness):
        data = wellness_completion_rate(
            make_wellness([NEUTRAL]), days=2, as_of=date(2024, 1, 2)
        ).to_dict()
        assert data == {
            "completion_rate": 50.0,
            "completed_days": 1,
            "total_days": 2,
            "missed_dates": ["2024-01-02"],
        }
