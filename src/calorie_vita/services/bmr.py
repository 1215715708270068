"""Basal metabolic rate estimates (Mifflin-St Jeor)."""

from datetime import datetime

from calorie_vita.domain.models import Gender, ProfileMetrics

_MALE_OFFSET = 5.0
_OTHER_OFFSET = -161.0


def daily_bmr(profile: ProfileMetrics) -> float:
    """Return calories burned at rest per day."""
    height_cm = profile.height_m * 100
    bmr = 10 * profile.weight_kg + 6.25 * height_cm - 5 * profile.age_years
    if profile.gender is Gender.MALE:
        return bmr + _MALE_OFFSET
    return bmr + _OTHER_OFFSET


def bmr_for_elapsed(bmr_per_day: float, now: datetime) -> float:
    """Return resting calories burned since midnight of ``now``."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    elapsed_hours = (now - midnight).total_seconds() / 3600
    return bmr_per_day / 24 * elapsed_hours


def estimate_active_calories(
    total_calories: float, profile: ProfileMetrics, now: datetime
) -> float:
    """Estimate active calories by removing resting burn from a daily total."""
    basal = bmr_for_elapsed(daily_bmr(profile), now)
    return max(total_calories - basal, 0.0)
