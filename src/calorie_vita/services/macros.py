"""Macro adherence and balance calculations."""

from calorie_vita.domain.nutrition import (
    CALORIES_PER_GRAM,
    BalanceVerdict,
    MacroAdherence,
    MacroBreakdown,
    MacroGoal,
    MacroKind,
    MacroPercentages,
    MacroProgress,
)
from calorie_vita.services.rounding import round_half_away

# 2000 kcal reference day used for the quality score.
_REFERENCE = MacroBreakdown(carbs_g=300.0, protein_g=150.0, fat_g=67.0)
_QUALITY_WEIGHTS = {
    MacroKind.CARBS: 0.40,
    MacroKind.PROTEIN: 0.35,
    MacroKind.FAT: 0.25,
}

_BALANCED_CARBS = (45.0, 65.0)
_BALANCED_PROTEIN = (10.0, 35.0)
_BALANCED_FAT = (20.0, 35.0)
_MAX_CARBS = 70.0
_MAX_PROTEIN = 40.0
_MAX_FAT = 40.0


def macro_progress(
    actual_g: float, goal_calories: float, kind: MacroKind
) -> MacroProgress:
    """Return progress of actual grams against a calorie-based macro goal."""
    if goal_calories <= 0:
        return MacroProgress(
            kind=kind,
            actual_g=actual_g,
            goal_g=0.0,
            ratio=0.0,
            percent=0,
            goal_set=False,
        )
    goal_g = goal_calories / CALORIES_PER_GRAM[kind]
    raw = actual_g / goal_g
    ratio = _clamp(raw, 0.0, 1.0)
    return MacroProgress(
        kind=kind,
        actual_g=actual_g,
        goal_g=goal_g,
        ratio=ratio,
        percent=min(round_half_away(raw * 100), 100),
        goal_set=True,
    )


def macro_adherence(breakdown: MacroBreakdown, goal: MacroGoal) -> MacroAdherence:
    """Return per-macro progress plus the aggregate achieved count."""
    carbs, protein, fat = (
        macro_progress(breakdown.grams(kind), goal.calories(kind), kind)
        for kind in (MacroKind.CARBS, MacroKind.PROTEIN, MacroKind.FAT)
    )
    parts = (carbs, protein, fat)
    return MacroAdherence(
        carbs=carbs,
        protein=protein,
        fat=fat,
        achieved_count=sum(1 for part in parts if part.ratio >= 1.0),
        overall_ratio=sum(part.ratio for part in parts) / len(parts),
        goal_set=any(part.goal_set for part in parts),
    )


def macro_quality_score(breakdown: MacroBreakdown) -> float:
    """Score macros 0-100 by closeness to a 2000 kcal reference day."""
    score = 0.0
    for kind, weight in _QUALITY_WEIGHTS.items():
        reference = _REFERENCE.grams(kind)
        closeness = 1 - abs(breakdown.grams(kind) - reference) / reference
        score += _clamp(closeness, 0.0, 1.0) * weight
    return _clamp(score * 100, 0.0, 100.0)


def macro_percentages(breakdown: MacroBreakdown) -> MacroPercentages | None:
    """Return each macro's share of total grams, or None without data."""
    total = breakdown.total_g
    if total <= 0:
        return None
    return MacroPercentages(
        carbs=breakdown.carbs_g / total * 100,
        protein=breakdown.protein_g / total * 100,
        fat=breakdown.fat_g / total * 100,
    )


def classify_balance(
    carbs_pct: float | None, protein_pct: float | None, fat_pct: float | None
) -> BalanceVerdict:
    """Classify macro percentages. Bands are checked in order, first wins."""
    if carbs_pct is None or protein_pct is None or fat_pct is None:
        return BalanceVerdict.NO_DATA
    if carbs_pct == 0 and protein_pct == 0 and fat_pct == 0:
        return BalanceVerdict.NO_DATA
    if (
        _within(carbs_pct, _BALANCED_CARBS)
        and _within(protein_pct, _BALANCED_PROTEIN)
        and _within(fat_pct, _BALANCED_FAT)
    ):
        return BalanceVerdict.WELL_BALANCED
    if carbs_pct > _MAX_CARBS or protein_pct > _MAX_PROTEIN or fat_pct > _MAX_FAT:
        return BalanceVerdict.NEEDS_ADJUSTMENT
    return BalanceVerdict.GOOD_BALANCE


def classify_breakdown(breakdown: MacroBreakdown) -> BalanceVerdict:
    """Classify the balance of a macro breakdown."""
    percentages = macro_percentages(breakdown)
    if percentages is None:
        return BalanceVerdict.NO_DATA
    return classify_balance(percentages.carbs, percentages.protein, percentages.fat)


def _within(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
