"""Analytics service composing the scoring calculators with user data."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID

from calorie_vita.domain.errors import ProfileIncompleteError
from calorie_vita.domain.health import BmiReport, ScoreResult
from calorie_vita.domain.models import Gender, ProfileMetrics, UserProfile
from calorie_vita.domain.nutrition import MacroBreakdown, MacroReport
from calorie_vita.domain.stats import (
    CalorieTargets,
    DailyGoalType,
    DailySummary,
    GoalStreak,
    PeriodChanges,
    UserGoals,
)
from calorie_vita.services.bmi import bmi_recommendation, compute_bmi
from calorie_vita.services.bmr import estimate_active_calories
from calorie_vita.services.cache import Cache
from calorie_vita.services.fitness_goals import action_guidance, remaining_calories
from calorie_vita.services.macros import (
    classify_breakdown,
    macro_adherence,
    macro_percentages,
    macro_quality_score,
)
from calorie_vita.services.periods import days_for_period, period_changes
from calorie_vita.services.rounding import round_half_away
from calorie_vita.services.streaks import calculate_streaks
from calorie_vita.services.weight_progress import weight_progress

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Read access to user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""


class DailySummaryRepository(Protocol):
    """Read access to per-day intake and activity aggregates."""

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return summaries with ``start <= day <= end``."""


class GoalsRepository(Protocol):
    """Read access to user goals."""

    def get_goals(self, user_id: UUID) -> UserGoals | None:
        """Return the user's goals, if configured."""

    def save_goals(self, user_id: UUID, goals: UserGoals) -> UserGoals:
        """Create or replace the user's goals and return the stored values."""


@dataclass
class AnalyticsService:
    """Builds analytics reports for a user from injected data sources."""

    profiles: ProfileRepository
    summaries: DailySummaryRepository
    goals: GoalsRepository
    cache: Cache
    default_goals: UserGoals = field(default_factory=UserGoals)
    summary_ttl_seconds: int = 300
    lookback_days: int = 60

    def get_bmi(self, user_id: UUID) -> BmiReport:
        """Return the user's BMI with a recommendation."""
        metrics = self._require_metrics(user_id)
        result = compute_bmi(metrics.weight_kg, metrics.height_m)
        personalized = metrics.gender is not Gender.UNKNOWN and metrics.age_years > 0
        return BmiReport(
            result=result,
            recommendation=bmi_recommendation(
                result.category, metrics if personalized else None
            ),
        )

    def get_weight_progress(self, user_id: UUID) -> ScoreResult:
        """Score the user's current weight against their goal weight."""
        profile = self.profiles.get_profile(user_id)
        if profile is None or profile.weight_kg is None:
            raise ProfileIncompleteError(user_id, "weight")
        goals = self._resolve_goals(user_id)
        return weight_progress(
            profile.weight_kg,
            goals.weight_goal_kg or 0.0,
            goals.fitness_goal,
        )

    def get_macro_report(self, user_id: UUID, day: date | None = None) -> MacroReport:
        """Score a day's macro intake against the user's macro goals."""
        target = day or date.today()
        breakdown = MacroBreakdown.empty()
        for summary in self._list_summaries(user_id, target, target):
            breakdown = breakdown + summary.macros
        goals = self._resolve_goals(user_id)
        return MacroReport(
            breakdown=breakdown,
            adherence=macro_adherence(breakdown, goals.macro_goal),
            percentages=macro_percentages(breakdown),
            balance=classify_breakdown(breakdown),
            quality_score=macro_quality_score(breakdown),
        )

    def get_calorie_targets(
        self, user_id: UUID, day: date | None = None, now: datetime | None = None
    ) -> CalorieTargets:
        """Return calories left for the day given the user's fitness goal.

        Active calories are estimated only when the profile has height and
        weight. For past days the full day of resting burn is removed.
        """
        target = day or date.today()
        summaries = self._list_summaries(user_id, target, target)
        consumed = sum(summary.calories_consumed for summary in summaries)
        burned_total = sum(summary.calories_burned for summary in summaries)
        burned = round_half_away(burned_total)
        goals = self._resolve_goals(user_id)
        remaining = remaining_calories(
            goals.fitness_goal, goals.calorie_goal, consumed, burned
        )

        active: float | None = None
        try:
            metrics = self._require_metrics(user_id)
        except ProfileIncompleteError as exc:
            _logger.debug(
                "Skipping active calories: user=%s missing=%s", user_id, exc.missing
            )
        else:
            moment = now or (
                datetime.now()
                if target == date.today()
                else datetime.combine(target, time.max)
            )
            active = estimate_active_calories(burned_total, metrics, moment)

        return CalorieTargets(
            day=target,
            fitness_goal=goals.fitness_goal,
            calorie_goal=goals.calorie_goal,
            consumed=consumed,
            burned=burned,
            remaining=remaining,
            guidance=action_guidance(goals.fitness_goal, remaining),
            active_calories=active,
        )

    def get_period_changes(
        self, user_id: UUID, period: str | None = None, today: date | None = None
    ) -> PeriodChanges:
        """Compare the current period with the one before it."""
        end = today or date.today()
        days = days_for_period(period)
        start = end - timedelta(days=days * 2 - 1)
        return period_changes(self._list_summaries(user_id, start, end), days)

    def get_streaks(
        self, user_id: UUID, today: date | None = None
    ) -> dict[DailyGoalType, GoalStreak]:
        """Return streaks for every daily goal."""
        end = today or date.today()
        start = end - timedelta(days=self.lookback_days - 1)
        return calculate_streaks(
            self._list_summaries(user_id, start, end),
            self._resolve_goals(user_id),
            end,
        )

    def update_goals(self, user_id: UUID, goals: UserGoals) -> UserGoals:
        """Persist new goals and drop stale cached reports."""
        stored = self.goals.save_goals(user_id, goals)
        self.invalidate_user(user_id)
        return stored

    def invalidate_user(self, user_id: UUID) -> None:
        """Drop cached data for a user after their records change."""
        dropped = self.cache.invalidate_prefix(_cache_prefix(user_id))
        _logger.info(
            "Analytics cache invalidated: user=%s entries=%s", user_id, dropped
        )

    def _require_metrics(self, user_id: UUID) -> ProfileMetrics:
        profile = self.profiles.get_profile(user_id)
        if profile is None:
            raise ProfileIncompleteError(user_id, "profile")
        if not profile.height_m or profile.height_m <= 0:
            raise ProfileIncompleteError(user_id, "height")
        if not profile.weight_kg or profile.weight_kg <= 0:
            raise ProfileIncompleteError(user_id, "weight")
        return ProfileMetrics(
            height_m=profile.height_m,
            weight_kg=profile.weight_kg,
            gender=profile.gender,
            age_years=profile.age_years or 0,
        )

    def _resolve_goals(self, user_id: UUID) -> UserGoals:
        cache_key = f"{_cache_prefix(user_id)}goals"
        cached = self.cache.get(cache_key)
        if isinstance(cached, UserGoals):
            return cached

        goals = self.goals.get_goals(user_id) or self.default_goals
        self.cache.set(cache_key, goals, ttl_seconds=self.summary_ttl_seconds)
        return goals

    def _list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        cache_key = (
            f"{_cache_prefix(user_id)}summaries:{start.isoformat()}:{end.isoformat()}"
        )
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        summaries = self.summaries.list_summaries(user_id, start, end)
        self.cache.set(cache_key, summaries, ttl_seconds=self.summary_ttl_seconds)
        _logger.debug(
            "Loaded daily summaries: user=%s start=%s end=%s count=%s",
            user_id,
            start,
            end,
            len(summaries),
        )
        return summaries


def _cache_prefix(user_id: UUID) -> str:
    return f"analytics:{user_id}:"
