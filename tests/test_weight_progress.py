"""Tests for weight-goal progress scoring."""

import pytest

from calorie_vita.domain.health import WeightStatus
from calorie_vita.domain.models import FitnessGoal
from calorie_vita.services.weight_progress import weight_progress


def test_weight_loss_above_goal() -> None:
    result = weight_progress(80, 75, "weight loss")

    assert result.achieved is False
    assert result.difference_kg == 5
    assert result.progress_percent == pytest.approx(77.78, abs=0.01)
    assert result.status is WeightStatus.ABOVE_GOAL
    assert result.message == "5.0 kg above your goal of 75.0 kg"


def test_weight_loss_reached_goal() -> None:
    result = weight_progress(74, 75, FitnessGoal.WEIGHT_LOSS)

    assert result.achieved is True
    assert result.progress_percent == 100.0
    assert result.status is WeightStatus.ACHIEVED
    assert result.message == "1.0 kg below your goal of 75.0 kg"


def test_weight_loss_far_above_goal_floors_at_zero() -> None:
    result = weight_progress(120, 60, "general_fitness")

    assert result.progress_percent == 0.0
    assert result.status is WeightStatus.ABOVE_GOAL


def test_maintenance_within_tolerance() -> None:
    result = weight_progress(70, 71, "maintenance")

    assert result.difference_kg == -1
    assert result.achieved is True
    assert result.progress_percent == 100.0
    assert result.status is WeightStatus.ACHIEVED


def test_maintenance_outside_tolerance() -> None:
    on_track = weight_progress(83, 80, "Maintenance")
    off_target = weight_progress(87, 80, "Maintenance")

    # band is 8 kg: (8 - 3) / 8 and (8 - 7) / 8
    assert on_track.progress_percent == pytest.approx(62.5)
    assert on_track.status is WeightStatus.ON_TRACK
    assert off_target.progress_percent == pytest.approx(12.5)
    assert off_target.status is WeightStatus.OFF_TARGET


def test_muscle_building_below_goal() -> None:
    result = weight_progress(72, 80, "muscle-building")

    # band is 16 kg: (16 - 8) / 16
    assert result.achieved is False
    assert result.progress_percent == pytest.approx(50.0)
    assert result.status is WeightStatus.BELOW_GOAL
    assert result.message == "8.0 kg below your goal of 80.0 kg"


def test_weight_gain_above_goal_is_achieved() -> None:
    result = weight_progress(66, 65, "Athletic_Performance")

    assert result.achieved is True
    assert result.status is WeightStatus.ACHIEVED


def test_unknown_goal_falls_back_to_maintenance() -> None:
    unknown = weight_progress(83, 80, "get shredded")
    missing = weight_progress(83, 80, None)
    maintenance = weight_progress(83, 80, "maintenance")

    assert unknown == maintenance
    assert missing == maintenance


@pytest.mark.parametrize("variant", ["Weight_Loss", "weight-loss", " Weight Loss "])
def test_goal_spelling_variants_match_canonical(variant: str) -> None:
    assert weight_progress(80, 75, variant) == weight_progress(80, 75, "weight loss")


@pytest.mark.parametrize(
    ("current", "goal", "fitness_goal"),
    [
        (60, 75, "weight loss"),
        (90, 75, "weight gain"),
        (75.5, 75, "maintenance"),
        (75, 75, "muscle building"),
    ],
)
def test_achieved_always_reports_full_progress(
    current: float, goal: float, fitness_goal: str
) -> None:
    result = weight_progress(current, goal, fitness_goal)

    assert result.achieved
    assert result.progress_percent == 100.0


def test_zero_goal_weight_reports_no_goal() -> None:
    result = weight_progress(80, 0, "weight loss")

    assert result.achieved is False
    assert result.progress_percent == 0.0
    assert result.status is WeightStatus.NO_GOAL
    assert result.goal_set is False
