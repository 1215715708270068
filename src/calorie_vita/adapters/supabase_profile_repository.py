"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_vita.domain.models import Gender, UserProfile
from calorie_vita.services.analytics import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile reads."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("user_id, height_cm, weight_kg, gender, age")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        height_cm = _optional_float(row.get("height_cm"))
        age = row.get("age")
        return UserProfile(
            user_id=user_id,
            # Profiles store height in centimetres.
            height_m=height_cm / 100.0 if height_cm is not None else None,
            weight_kg=_optional_float(row.get("weight_kg")),
            gender=Gender.parse(row.get("gender")),
            age_years=int(age) if age is not None else None,
        )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
