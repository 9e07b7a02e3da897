"""Domain models for smart re-logging suggestions."""

from dataclasses import dataclass
from enum import Enum

from nutrition_analytics.domain.entries import FoodLogEntry


class SuggestionReason(str, Enum):
    """Why a food was suggested, in priority order."""

    USUAL_TIME = "usually eaten around this time"
    FREQUENT = "frequently eaten"
    ADDED_RECENTLY = "added recently"
    RECENTLY_ADDED = "recently added"


@dataclass(frozen=True)
class SmartSuggestion:
    """A previously eaten food ranked for quick re-logging."""

    entry: FoodLogEntry
    score: float
    reason: SuggestionReason
    last_eaten_label: str
    frequency: int
    frequency_score: float
    time_score: float
    recency_score: float
