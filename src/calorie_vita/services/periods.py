"""Period-over-period change calculations for daily summaries.

All calculators window summaries newest first: the current period is the
first ``period_days`` entries and the previous period the ``period_days``
entries after it. Inputs are re-ordered by date, so callers may pass
summaries in any order.
"""

from collections.abc import Iterable

from calorie_vita.domain.errors import InvalidInputError
from calorie_vita.domain.stats import DailySummary, PeriodChanges, PeriodMetric
from calorie_vita.services.rounding import round_half_away

_PERIOD_DAYS = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
}
DEFAULT_PERIOD_DAYS = 7


def days_for_period(label: str | None) -> int:
    """Return the window length for a period label."""
    if not label:
        return DEFAULT_PERIOD_DAYS
    return _PERIOD_DAYS.get(label.strip().lower(), DEFAULT_PERIOD_DAYS)


def order_newest_first(summaries: Iterable[DailySummary]) -> list[DailySummary]:
    """Return summaries sorted by date, most recent first."""
    return sorted(summaries, key=lambda summary: summary.day, reverse=True)


def percent_change(
    summaries: Iterable[DailySummary],
    period_days: int,
    metric: PeriodMetric | str,
) -> str:
    """Return the signed percentage change of a metric, e.g. ``+12%``."""
    resolved = PeriodMetric(metric)
    current, previous = _windows(summaries, period_days)
    if not current or not previous:
        return "0%"
    current_total = sum(_metric_value(summary, resolved) for summary in current)
    previous_total = sum(_metric_value(summary, resolved) for summary in previous)
    if previous_total == 0:
        return "0%"
    change = round_half_away((current_total - previous_total) / previous_total * 100)
    return f"+{change}%" if change >= 0 else f"{change}%"


def workout_change(summaries: Iterable[DailySummary], period_days: int) -> str:
    """Return the signed change in workout days, e.g. ``+2``."""
    current, previous = _windows(summaries, period_days)
    if not current or not previous:
        return "0"
    change = _workout_days(current) - _workout_days(previous)
    return f"+{change}" if change >= 0 else f"{change}"


def period_changes(
    summaries: Iterable[DailySummary], period_days: int
) -> PeriodChanges:
    """Return calorie, step and workout changes for one period length."""
    ordered = order_newest_first(summaries)
    return PeriodChanges(
        period_days=period_days,
        calories=percent_change(ordered, period_days, PeriodMetric.CALORIES),
        steps=percent_change(ordered, period_days, PeriodMetric.STEPS),
        workouts=workout_change(ordered, period_days),
    )


def _windows(
    summaries: Iterable[DailySummary], period_days: int
) -> tuple[list[DailySummary], list[DailySummary]]:
    if period_days < 1:
        raise InvalidInputError(f"period_days must be at least 1, got {period_days}")
    ordered = order_newest_first(summaries)
    if len(ordered) < 2:  # noqa: PLR2004
        return [], []
    current = ordered[:period_days]
    previous = ordered[period_days : period_days * 2]
    return current, previous


def _metric_value(summary: DailySummary, metric: PeriodMetric) -> float:
    if metric is PeriodMetric.CALORIES:
        return summary.calories_consumed
    return summary.steps


def _workout_days(window: list[DailySummary]) -> int:
    return sum(1 for summary in window if summary.calories_burned > 0)
