"""Daily goal streak calculations."""

from collections.abc import Iterable
from datetime import date, timedelta

from calorie_vita.domain.stats import DailyGoalType, DailySummary, GoalStreak, UserGoals

EXERCISE_STEPS_THRESHOLD = 5000


def is_goal_achieved(
    goal_type: DailyGoalType, summary: DailySummary, goals: UserGoals
) -> bool:
    """Return True when a day's summary meets a daily goal."""
    if goal_type is DailyGoalType.CALORIE_GOAL:
        return summary.calories_consumed >= goals.calorie_goal
    if goal_type is DailyGoalType.STEPS:
        return summary.steps >= goals.steps_goal
    if goal_type is DailyGoalType.EXERCISE:
        return summary.calories_burned > 0 or summary.steps > EXERCISE_STEPS_THRESHOLD
    if goal_type is DailyGoalType.WATER_INTAKE:
        return summary.water_glasses >= goals.water_glasses_goal
    # Any logged intake counts as tracking for the day.
    return summary.calories_consumed > 0


def calculate_streak(
    goal_type: DailyGoalType,
    summaries: Iterable[DailySummary],
    goals: UserGoals,
    today: date,
) -> GoalStreak:
    """Compute current and longest streaks for one goal.

    The current streak counts consecutive achieved days ending today, so it
    is zero whenever today's goal is not met yet. Days with no summary break
    a streak.
    """
    achieved_days = sorted(
        {
            summary.day
            for summary in summaries
            if summary.day <= today and is_goal_achieved(goal_type, summary, goals)
        }
    )

    longest = 0
    run = 0
    previous: date | None = None
    for day in achieved_days:
        if previous is not None and day - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day

    achieved_set = set(achieved_days)
    current = 0
    streak_start: date | None = None
    cursor = today
    while cursor in achieved_set:
        current += 1
        streak_start = cursor
        cursor -= timedelta(days=1)

    return GoalStreak(
        goal_type=goal_type,
        current_streak=current,
        longest_streak=longest,
        total_days_achieved=len(achieved_days),
        achieved_today=today in achieved_set,
        streak_start=streak_start,
    )


def calculate_streaks(
    summaries: Iterable[DailySummary], goals: UserGoals, today: date
) -> dict[DailyGoalType, GoalStreak]:
    """Compute streaks for every daily goal type."""
    materialized = list(summaries)
    return {
        goal_type: calculate_streak(goal_type, materialized, goals, today)
        for goal_type in DailyGoalType
    }
