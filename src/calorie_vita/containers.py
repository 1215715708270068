"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_vita.adapters.supabase_daily_summary_repository import (
    SupabaseDailySummaryRepository,
)
from calorie_vita.adapters.supabase_goals_repository import SupabaseGoalsRepository
from calorie_vita.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_vita.config import Settings
from calorie_vita.services.analytics import AnalyticsService
from calorie_vita.services.cache import InMemoryCache


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analytics_service: AnalyticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    analytics_service = AnalyticsService(
        profiles=SupabaseProfileRepository(supabase_client),
        summaries=SupabaseDailySummaryRepository(supabase_client),
        goals=SupabaseGoalsRepository(supabase_client),
        cache=InMemoryCache(),
        default_goals=resolved_settings.default_goals(),
        summary_ttl_seconds=resolved_settings.summary_ttl_seconds,
        lookback_days=resolved_settings.summary_lookback_days,
    )
    return AppContainer(
        settings=resolved_settings,
        analytics_service=analytics_service,
    )
