"""Weight-goal progress scoring."""

from calorie_vita.domain.health import ScoreResult, WeightStatus
from calorie_vita.domain.models import FitnessGoal, GoalGroup, goal_group

MAINTENANCE_TOLERANCE_KG = 2.0

# Share of the goal weight over which progress falls from 100% to 0%.
_PROGRESS_BANDS = {
    GoalGroup.LOSS: 0.3,
    GoalGroup.GAIN: 0.2,
    GoalGroup.MAINTAIN: 0.1,
}
_ON_TRACK_PERCENT = 50.0


def weight_progress(
    current_kg: float, goal_kg: float, fitness_goal: FitnessGoal | str | None
) -> ScoreResult:
    """Score progress from the current weight towards a goal weight.

    The fitness goal decides which direction counts as success: loss goals
    are met at or below the goal, gain goals at or above it, and maintenance
    (also the fallback for unknown goals) within 2 kg either side.
    A non-positive goal weight yields a "No Goal Set" result.
    """
    if goal_kg <= 0:
        return ScoreResult(
            achieved=False,
            progress_percent=0.0,
            status=WeightStatus.NO_GOAL,
            message="Set a goal weight to track your progress.",
        )

    group = goal_group(fitness_goal)
    diff = current_kg - goal_kg
    achieved = _is_achieved(group, diff)
    progress = 100.0 if achieved else _progress_percent(group, diff, goal_kg)
    return ScoreResult(
        achieved=achieved,
        progress_percent=progress,
        status=_status(group, achieved, progress),
        message=_message(diff, goal_kg),
        difference_kg=diff,
    )


def _is_achieved(group: GoalGroup, diff: float) -> bool:
    if group is GoalGroup.LOSS:
        return diff <= 0
    if group is GoalGroup.GAIN:
        return diff >= 0
    return abs(diff) <= MAINTENANCE_TOLERANCE_KG


def _progress_percent(group: GoalGroup, diff: float, goal_kg: float) -> float:
    band = goal_kg * _PROGRESS_BANDS[group]
    distance = diff if group is GoalGroup.LOSS else abs(diff)
    return _clamp((band - distance) / band * 100, 0.0, 100.0)


def _status(group: GoalGroup, achieved: bool, progress: float) -> WeightStatus:
    if achieved:
        return WeightStatus.ACHIEVED
    if group is GoalGroup.LOSS:
        return WeightStatus.ABOVE_GOAL
    if group is GoalGroup.GAIN:
        return WeightStatus.BELOW_GOAL
    if progress >= _ON_TRACK_PERCENT:
        return WeightStatus.ON_TRACK
    return WeightStatus.OFF_TARGET


def _message(diff: float, goal_kg: float) -> str:
    if diff > 0:
        return f"{diff:.1f} kg above your goal of {goal_kg:.1f} kg"
    if diff < 0:
        return f"{abs(diff):.1f} kg below your goal of {goal_kg:.1f} kg"
    return f"Right on your goal of {goal_kg:.1f} kg"


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
