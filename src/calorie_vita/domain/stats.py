"""Domain models for daily activity statistics."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from calorie_vita.domain.models import FitnessGoal
from calorie_vita.domain.nutrition import MacroBreakdown, MacroGoal


@dataclass(frozen=True)
class DailySummary:
    """Aggregated intake and activity for a single calendar day."""

    day: date
    calories_consumed: int
    calories_burned: float
    steps: int
    water_glasses: int = 0
    macros: MacroBreakdown = field(default_factory=MacroBreakdown.empty)


@dataclass(frozen=True)
class UserGoals:
    """Targets configured by a user."""

    weight_goal_kg: float | None = None
    calorie_goal: int = 2000
    steps_goal: int = 10000
    water_glasses_goal: int = 8
    fitness_goal: FitnessGoal | None = None
    macro_goal: MacroGoal = field(default_factory=MacroGoal)


class PeriodMetric(StrEnum):
    """Summed metrics compared between periods."""

    CALORIES = "calories"
    STEPS = "steps"


@dataclass(frozen=True)
class PeriodChanges:
    """Formatted change between the current and preceding period."""

    period_days: int
    calories: str
    steps: str
    workouts: str


class DailyGoalType(StrEnum):
    """Daily goals tracked for streaks."""

    CALORIE_GOAL = "calorie_goal"
    STEPS = "steps"
    EXERCISE = "exercise"
    WATER_INTAKE = "water_intake"
    WEIGHT_TRACKING = "weight_tracking"


@dataclass(frozen=True)
class GoalStreak:
    """Streak state for one daily goal."""

    goal_type: DailyGoalType
    current_streak: int
    longest_streak: int
    total_days_achieved: int
    achieved_today: bool
    streak_start: date | None


@dataclass(frozen=True)
class CalorieTargets:
    """Goal-dependent calorie balance for one day."""

    day: date
    fitness_goal: FitnessGoal | None
    calorie_goal: int
    consumed: int
    burned: int
    remaining: int
    guidance: str
    active_calories: float | None = None
