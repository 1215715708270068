"""Domain models for user profiles and fitness goals."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class Gender(StrEnum):
    """Gender recorded on a user profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: object) -> "Gender":
        """Map free text to a gender, defaulting to unknown."""
        if not isinstance(raw, str) or not raw:
            return cls.UNKNOWN
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNKNOWN


def normalize_goal(text: str) -> str:
    """Normalize a fitness goal label to its canonical spaced form."""
    cleaned = text.lower().replace("_", " ").replace("-", " ")
    return " ".join(cleaned.split())


class FitnessGoal(StrEnum):
    """User-declared fitness intent."""

    WEIGHT_LOSS = "weight loss"
    WEIGHT_GAIN = "weight gain"
    MAINTENANCE = "maintenance"
    MUSCLE_BUILDING = "muscle building"
    ATHLETIC_PERFORMANCE = "athletic performance"
    GENERAL_FITNESS = "general fitness"

    @classmethod
    def parse(cls, text: str | None) -> "FitnessGoal | None":
        """Return the goal for free text, or None when unrecognised."""
        if text is None:
            return None
        try:
            return cls(normalize_goal(text))
        except ValueError:
            return None


class GoalGroup(StrEnum):
    """Direction of weight change that counts as success."""

    LOSS = "loss"
    GAIN = "gain"
    MAINTAIN = "maintain"


_GOAL_GROUPS = {
    FitnessGoal.WEIGHT_LOSS: GoalGroup.LOSS,
    FitnessGoal.GENERAL_FITNESS: GoalGroup.LOSS,
    FitnessGoal.WEIGHT_GAIN: GoalGroup.GAIN,
    FitnessGoal.MUSCLE_BUILDING: GoalGroup.GAIN,
    FitnessGoal.ATHLETIC_PERFORMANCE: GoalGroup.GAIN,
    FitnessGoal.MAINTENANCE: GoalGroup.MAINTAIN,
}


def goal_group(fitness_goal: "FitnessGoal | str | None") -> GoalGroup:
    """Return the goal group, falling back to maintenance for unknown goals."""
    if isinstance(fitness_goal, FitnessGoal):
        goal: FitnessGoal | None = fitness_goal
    else:
        goal = FitnessGoal.parse(fitness_goal)
    if goal is None:
        return GoalGroup.MAINTAIN
    return _GOAL_GROUPS[goal]


@dataclass(frozen=True)
class ProfileMetrics:
    """Body metrics snapshot taken from a user profile."""

    height_m: float
    weight_kg: float
    gender: Gender = Gender.UNKNOWN
    age_years: int = 0


@dataclass(frozen=True)
class UserProfile:
    """Profile document as stored; body metrics may be missing."""

    user_id: UUID
    height_m: float | None
    weight_kg: float | None
    gender: Gender = Gender.UNKNOWN
    age_years: int | None = None
