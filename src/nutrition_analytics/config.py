"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_analytics.domain.tuning import AnalyticsTuning

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_DEFAULTS = AnalyticsTuning()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    analytics_lookback_days: int = Field(default=_DEFAULTS.lookback_days, ge=0)
    analytics_suggestion_limit: int = Field(default=_DEFAULTS.suggestion_limit, gt=0)
    analytics_time_window_hours: float = Field(
        default=_DEFAULTS.time_window_hours, gt=0
    )
    analytics_same_weekday_bonus: float = _DEFAULTS.same_weekday_bonus
    analytics_recency_window_days: float = Field(
        default=_DEFAULTS.recency_window_days, gt=0
    )
    analytics_frequency_exponent: float = _DEFAULTS.frequency_exponent
    analytics_time_weight: float = Field(default=_DEFAULTS.time_weight, ge=0)
    analytics_recency_weight: float = Field(default=_DEFAULTS.recency_weight, ge=0)
    analytics_frequency_weight: float = Field(
        default=_DEFAULTS.frequency_weight, ge=0
    )
    analytics_usual_time_threshold: float = _DEFAULTS.usual_time_threshold
    analytics_frequent_threshold: int = _DEFAULTS.frequent_threshold
    analytics_recent_threshold: float = _DEFAULTS.recent_threshold
    analytics_search_frequency_factor: float = _DEFAULTS.search_frequency_factor
    analytics_exact_match_boost: float = _DEFAULTS.exact_match_boost
    analytics_prefix_match_boost: float = _DEFAULTS.prefix_match_boost
    analytics_goal_tolerance: float = Field(default=_DEFAULTS.goal_tolerance, gt=0)

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def tuning(self) -> AnalyticsTuning:
        """Build the engine tuning from ``analytics_*`` settings."""
        return AnalyticsTuning(
            lookback_days=self.analytics_lookback_days,
            suggestion_limit=self.analytics_suggestion_limit,
            time_window_hours=self.analytics_time_window_hours,
            same_weekday_bonus=self.analytics_same_weekday_bonus,
            recency_window_days=self.analytics_recency_window_days,
            frequency_exponent=self.analytics_frequency_exponent,
            time_weight=self.analytics_time_weight,
            recency_weight=self.analytics_recency_weight,
            frequency_weight=self.analytics_frequency_weight,
            usual_time_threshold=self.analytics_usual_time_threshold,
            frequent_threshold=self.analytics_frequent_threshold,
            recent_threshold=self.analytics_recent_threshold,
            search_frequency_factor=self.analytics_search_frequency_factor,
            exact_match_boost=self.analytics_exact_match_boost,
            prefix_match_boost=self.analytics_prefix_match_boost,
            goal_tolerance=self.analytics_goal_tolerance,
        )
