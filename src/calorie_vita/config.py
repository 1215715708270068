"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_vita.domain.stats import UserGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    summary_ttl_seconds: int = 300
    summary_lookback_days: int = 60
    default_period: str = "weekly"
    default_calorie_goal: int = 2000
    default_steps_goal: int = 10000
    default_water_glasses_goal: int = 8

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_goals(self) -> UserGoals:
        """Goals applied to users who have not configured their own."""
        return UserGoals(
            calorie_goal=self.default_calorie_goal,
            steps_goal=self.default_steps_goal,
            water_glasses_goal=self.default_water_glasses_goal,
        )
