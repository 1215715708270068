"""Body metric and goal scoring models."""

from dataclasses import dataclass
from enum import StrEnum


class BmiCategory(StrEnum):
    """WHO body mass index bands."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class Severity(StrEnum):
    """Severity tag used to color a BMI category."""

    CAUTION = "caution"
    OK = "ok"
    WARNING = "warning"
    ALERT = "alert"


@dataclass(frozen=True)
class BmiResult:
    """Computed BMI with its category."""

    bmi: float
    category: BmiCategory
    severity: Severity
    color: str


class WeightStatus(StrEnum):
    """Status label for weight-goal progress."""

    ACHIEVED = "Goal Achieved!"
    ABOVE_GOAL = "Above Goal"
    BELOW_GOAL = "Below Goal"
    ON_TRACK = "On Track"
    OFF_TARGET = "Off Target"
    NO_GOAL = "No Goal Set"


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of a goal progress calculation."""

    achieved: bool
    progress_percent: float
    status: WeightStatus
    message: str
    difference_kg: float = 0.0

    @property
    def goal_set(self) -> bool:
        return self.status is not WeightStatus.NO_GOAL


@dataclass(frozen=True)
class BmiReport:
    """BMI result with the recommendation shown alongside it."""

    result: BmiResult
    recommendation: str
