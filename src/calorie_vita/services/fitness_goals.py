"""Calorie targets that depend on the user's fitness goal."""

from calorie_vita.domain.models import FitnessGoal, GoalGroup, goal_group


def remaining_calories(
    fitness_goal: FitnessGoal | str | None,
    base_goal: int,
    consumed: int,
    burned: int,
) -> int:
    """Return calories left for the day.

    Loss goals track calories still to burn, gain goals calories still to
    eat, and maintenance the net balance.
    """
    group = goal_group(fitness_goal)
    if group is GoalGroup.LOSS:
        return base_goal - burned
    if group is GoalGroup.GAIN:
        return base_goal - consumed
    return base_goal + consumed - burned


def action_guidance(fitness_goal: FitnessGoal | str | None, remaining: int) -> str:
    """Return a one-line hint for closing the remaining calorie gap."""
    goal = (
        fitness_goal
        if isinstance(fitness_goal, FitnessGoal)
        else FitnessGoal.parse(fitness_goal)
    )
    group = goal_group(goal)
    amount = abs(remaining)
    if group is GoalGroup.LOSS:
        if remaining > 0:
            return f"Burn {amount} more calories to reach your goal"
        return "Great! You've reached your burn target!"
    if goal is FitnessGoal.MUSCLE_BUILDING:
        if remaining > 0:
            return f"Eat {amount} more calories to fuel muscle growth"
        return "Amazing! You've reached your muscle building target!"
    if group is GoalGroup.GAIN:
        if remaining > 0:
            return f"Eat {amount} more calories to reach your goal"
        return "Excellent! You've reached your intake target!"
    if remaining > 0:
        return f"Eat {amount} more calories to maintain balance"
    return "Perfect! You've reached your maintenance target!"
