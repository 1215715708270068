"""Supabase repository for user goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_vita.domain.models import FitnessGoal
from calorie_vita.domain.nutrition import MacroGoal
from calorie_vita.domain.stats import UserGoals
from calorie_vita.services.analytics import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for user goals."""

    client: Client

    def get_goals(self, user_id: UUID) -> UserGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_goals(self, user_id: UUID, goals: UserGoals) -> UserGoals:
        """Upsert a user's goals."""
        payload = {
            "user_id": str(user_id),
            "weight_goal_kg": goals.weight_goal_kg,
            "calorie_goal": goals.calorie_goal,
            "steps_goal": goals.steps_goal,
            "water_glasses_goal": goals.water_glasses_goal,
            "fitness_goal": goals.fitness_goal.value if goals.fitness_goal else None,
            "carbs_calories": goals.macro_goal.carbs_calories,
            "protein_calories": goals.macro_goal.protein_calories,
            "fat_calories": goals.macro_goal.fat_calories,
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = (
            self.client.table("user_goals")
            .upsert(payload, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user goals")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserGoals:
    defaults = UserGoals()
    weight_goal = row.get("weight_goal_kg")
    raw_goal = row.get("fitness_goal")
    return UserGoals(
        weight_goal_kg=float(weight_goal) if weight_goal is not None else None,
        calorie_goal=int(row.get("calorie_goal") or defaults.calorie_goal),
        steps_goal=int(row.get("steps_goal") or defaults.steps_goal),
        water_glasses_goal=int(
            row.get("water_glasses_goal") or defaults.water_glasses_goal
        ),
        fitness_goal=FitnessGoal.parse(raw_goal) if isinstance(raw_goal, str) else None,
        macro_goal=MacroGoal(
            carbs_calories=float(row.get("carbs_calories") or 0.0),
            protein_calories=float(row.get("protein_calories") or 0.0),
            fat_calories=float(row.get("fat_calories") or 0.0),
        ),
    )
