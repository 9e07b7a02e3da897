"""Product-tuning constants for suggestions and goal tracking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyticsTuning:
    """Weights, windows and thresholds used by the analytics engine."""

    lookback_days: int = 30
    suggestion_limit: int = 10
    time_window_hours: float = 12
    same_weekday_bonus: float = 0.3
    recency_window_days: float = 7
    frequency_exponent: float = 1.5
    time_weight: float = 0.25
    recency_weight: float = 0.25
    frequency_weight: float = 0.5
    usual_time_threshold: float = 0.7
    frequent_threshold: int = 3
    recent_threshold: float = 0.8
    search_frequency_factor: float = 0.15
    exact_match_boost: float = 0.3
    prefix_match_boost: float = 0.1
    goal_tolerance: float = 0.9

    def __post_init__(self) -> None:
        if self.time_window_hours <= 0 or self.recency_window_days <= 0:
            raise ValueError("Time and recency windows must be positive")


DEFAULT_TUNING = AnalyticsTuning()
