"""Request models for the analytics API."""

from pydantic import BaseModel, Field

from calorie_vita.domain.models import FitnessGoal
from calorie_vita.domain.nutrition import MacroGoal
from calorie_vita.domain.stats import UserGoals


class MacroGoalPayload(BaseModel):
    carbs_calories: float = Field(default=0.0, ge=0)
    protein_calories: float = Field(default=0.0, ge=0)
    fat_calories: float = Field(default=0.0, ge=0)


class GoalsPayload(BaseModel):
    """Goals submitted from the goals screen."""

    weight_goal_kg: float | None = Field(default=None, gt=0)
    calorie_goal: int = Field(default=2000, gt=0)
    steps_goal: int = Field(default=10000, gt=0)
    water_glasses_goal: int = Field(default=8, gt=0)
    fitness_goal: str | None = None
    macro_goal: MacroGoalPayload = Field(default_factory=MacroGoalPayload)

    def to_domain(self) -> UserGoals:
        """Convert to domain goals, normalizing the fitness goal label."""
        return UserGoals(
            weight_goal_kg=self.weight_goal_kg,
            calorie_goal=self.calorie_goal,
            steps_goal=self.steps_goal,
            water_glasses_goal=self.water_glasses_goal,
            fitness_goal=FitnessGoal.parse(self.fitness_goal),
            macro_goal=MacroGoal(
                carbs_calories=self.macro_goal.carbs_calories,
                protein_calories=self.macro_goal.protein_calories,
                fat_calories=self.macro_goal.fat_calories,
            ),
        )
