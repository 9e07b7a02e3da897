"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_analytics.adapters.supabase_nutrition_gateway import (
    SupabaseNutritionGateway,
)
from nutrition_analytics.config import Settings
from nutrition_analytics.services.gateway import NutritionDataGateway
from nutrition_analytics.services.suggestions import SuggestionService
from nutrition_analytics.services.trends import TrendService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: NutritionDataGateway
    suggestion_service: SuggestionService
    trend_service: TrendService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    gateway = SupabaseNutritionGateway(supabase_client)
    tuning = resolved_settings.tuning()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        suggestion_service=SuggestionService(gateway, tuning=tuning),
        trend_service=TrendService(gateway, tuning=tuning),
    )
