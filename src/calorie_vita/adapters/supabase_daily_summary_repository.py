"""Supabase repository for daily summaries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_vita.domain.nutrition import MacroBreakdown
from calorie_vita.domain.stats import DailySummary
from calorie_vita.services.analytics import DailySummaryRepository

_COLUMNS = (
    "day, calories_consumed, calories_burned, steps, water_glasses, "
    "carbs_g, protein_g, fat_g, fiber_g, sugar_g"
)


@dataclass
class SupabaseDailySummaryRepository(DailySummaryRepository):
    """Supabase implementation for daily summary queries."""

    client: Client

    def list_summaries(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailySummary]:
        """Return summaries between two days, inclusive, newest first."""
        response = (
            self.client.table("daily_summaries")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> DailySummary:
    return DailySummary(
        day=date.fromisoformat(str(row["day"])),
        calories_consumed=int(row.get("calories_consumed") or 0),
        calories_burned=float(row.get("calories_burned") or 0.0),
        steps=int(row.get("steps") or 0),
        water_glasses=int(row.get("water_glasses") or 0),
        macros=MacroBreakdown(
            carbs_g=float(row.get("carbs_g") or 0.0),
            protein_g=float(row.get("protein_g") or 0.0),
            fat_g=float(row.get("fat_g") or 0.0),
            fiber_g=float(row.get("fiber_g") or 0.0),
            sugar_g=float(row.get("sugar_g") or 0.0),
        ),
    )
