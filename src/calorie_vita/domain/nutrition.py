"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class MacroKind(StrEnum):
    """Macronutrients tracked against calorie goals."""

    CARBS = "carbs"
    PROTEIN = "protein"
    FAT = "fat"


CALORIES_PER_GRAM = {
    MacroKind.CARBS: 4.0,
    MacroKind.PROTEIN: 4.0,
    MacroKind.FAT: 9.0,
}


@dataclass(frozen=True)
class MacroBreakdown:
    """Macronutrient grams consumed over a period."""

    carbs_g: float
    protein_g: float
    fat_g: float
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    @classmethod
    def empty(cls) -> "MacroBreakdown":
        return cls(carbs_g=0.0, protein_g=0.0, fat_g=0.0)

    @property
    def total_g(self) -> float:
        """Grams of carbs, protein and fat combined."""
        return self.carbs_g + self.protein_g + self.fat_g

    @property
    def total_calories(self) -> float:
        """Energy from carbs, protein and fat."""
        return (
            self.carbs_g * CALORIES_PER_GRAM[MacroKind.CARBS]
            + self.protein_g * CALORIES_PER_GRAM[MacroKind.PROTEIN]
            + self.fat_g * CALORIES_PER_GRAM[MacroKind.FAT]
        )

    def grams(self, kind: MacroKind) -> float:
        """Return grams for a single macro."""
        if kind is MacroKind.CARBS:
            return self.carbs_g
        if kind is MacroKind.PROTEIN:
            return self.protein_g
        return self.fat_g

    def __add__(self, other: "MacroBreakdown") -> "MacroBreakdown":
        return MacroBreakdown(
            carbs_g=self.carbs_g + other.carbs_g,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sugar_g=self.sugar_g + other.sugar_g,
        )


@dataclass(frozen=True)
class MacroGoal:
    """Calorie targets per macro. Zero means no goal is set."""

    carbs_calories: float = 0.0
    protein_calories: float = 0.0
    fat_calories: float = 0.0

    def calories(self, kind: MacroKind) -> float:
        """Return the calorie target for a single macro."""
        if kind is MacroKind.CARBS:
            return self.carbs_calories
        if kind is MacroKind.PROTEIN:
            return self.protein_calories
        return self.fat_calories


@dataclass(frozen=True)
class MacroProgress:
    """Adherence of one macro to its calorie-derived gram goal."""

    kind: MacroKind
    actual_g: float
    goal_g: float
    ratio: float
    percent: int
    goal_set: bool

    @property
    def achieved(self) -> bool:
        return self.goal_set and self.ratio >= 1.0


@dataclass(frozen=True)
class MacroAdherence:
    """Aggregate adherence across carbs, protein and fat."""

    carbs: MacroProgress
    protein: MacroProgress
    fat: MacroProgress
    achieved_count: int
    overall_ratio: float
    goal_set: bool


@dataclass(frozen=True)
class MacroPercentages:
    """Share of each macro in the combined gram total, in percent."""

    carbs: float
    protein: float
    fat: float


class BalanceVerdict(StrEnum):
    """Macro balance classification."""

    WELL_BALANCED = "Well Balanced"
    NEEDS_ADJUSTMENT = "Needs Adjustment"
    GOOD_BALANCE = "Good Balance"
    NO_DATA = "No Data"


@dataclass(frozen=True)
class MacroReport:
    """Macro intake for a day scored against the user's goals."""

    breakdown: MacroBreakdown
    adherence: MacroAdherence
    percentages: MacroPercentages | None
    balance: BalanceVerdict
    quality_score: float
