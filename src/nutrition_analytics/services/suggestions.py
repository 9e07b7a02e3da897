"""Smart suggestions for quickly re-logging foods."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID

from nutrition_analytics.domain.dates import DateRange, lookback_start, short_day_label
from nutrition_analytics.domain.entries import FoodLogEntry
from nutrition_analytics.domain.suggestions import SmartSuggestion, SuggestionReason
from nutrition_analytics.domain.tuning import DEFAULT_TUNING, AnalyticsTuning
from nutrition_analytics.errors import TrendDataUnavailableError
from nutrition_analytics.services.gateway import NutritionDataGateway

_logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


@dataclass
class SuggestionService:
    """Ranks a user's recent foods into re-logging suggestions."""

    gateway: NutritionDataGateway
    tuning: AnalyticsTuning = DEFAULT_TUNING

    def rank_suggestions(
        self,
        owner: UUID,
        now: datetime | None = None,
        search_term: str | None = None,
    ) -> list[SmartSuggestion]:
        """Return up to ``suggestion_limit`` suggestions from the lookback window."""
        current = now or datetime.now(tz=UTC)
        # Open-ended: local calendar dates may run ahead of UTC.
        window = DateRange(start=lookback_start(current, self.tuning.lookback_days))
        try:
            entries = self.gateway.fetch_food_entries(owner, window)
        except Exception as exc:
            _logger.exception("Failed to fetch food entries for suggestions")
            raise TrendDataUnavailableError("Failed to fetch food entries") from exc
        suggestions = rank_suggestions(entries, current, search_term, self.tuning)
        _logger.debug(
            "Ranked suggestions: entries=%s suggestions=%s search=%r",
            len(entries),
            len(suggestions),
            search_term,
        )
        return suggestions


def rank_suggestions(
    entries: list[FoodLogEntry],
    now: datetime,
    search_term: str | None = None,
    tuning: AnalyticsTuning = DEFAULT_TUNING,
) -> list[SmartSuggestion]:
    """Group entries by name, score each group and optionally filter by a term."""
    groups = _group_by_name(entries)
    if not groups:
        return []

    current = _as_aware(now)
    max_frequency = max(len(group) for group in groups.values())
    suggestions = [
        _score_group(group, current, max_frequency, tuning) for group in groups.values()
    ]
    ranked = sorted(suggestions, key=lambda item: item.score, reverse=True)[
        : tuning.suggestion_limit
    ]

    term = (search_term or "").strip().lower()
    if not term:
        return ranked
    return _search(ranked, term, tuning)


def _group_by_name(entries: list[FoodLogEntry]) -> dict[str, list[FoodLogEntry]]:
    groups: dict[str, list[FoodLogEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.name.lower(), []).append(entry)
    return groups


def _score_group(
    group: list[FoodLogEntry],
    now: datetime,
    max_frequency: int,
    tuning: AnalyticsTuning,
) -> SmartSuggestion:
    frequency = len(group)
    most_recent = max(group, key=lambda entry: _as_aware(entry.created_at))

    time_scores = [_time_similarity(entry, now, tuning) for entry in group]
    avg_time_score = sum(time_scores) / len(time_scores)

    days_since = (now - _as_aware(most_recent.created_at)) / _ONE_DAY
    recency_score = max(0.0, 1 - days_since / tuning.recency_window_days)

    frequency_score = frequency / max_frequency
    frequency_boost = (
        frequency**tuning.frequency_exponent
        / max_frequency**tuning.frequency_exponent
    )

    score = (
        avg_time_score * tuning.time_weight
        + recency_score * tuning.recency_weight
        + frequency_boost * tuning.frequency_weight
    )

    return SmartSuggestion(
        entry=most_recent,
        score=score,
        reason=_reason(avg_time_score, frequency, recency_score, tuning),
        last_eaten_label=short_day_label(_as_aware(most_recent.created_at)),
        frequency=frequency,
        frequency_score=frequency_score,
        time_score=avg_time_score,
        recency_score=recency_score,
    )


def _time_similarity(
    entry: FoodLogEntry, now: datetime, tuning: AnalyticsTuning
) -> float:
    """Score how close the entry's hour and weekday are to now."""
    eaten_at = _as_aware(entry.created_at).astimezone(now.tzinfo)
    hour_diff = abs(now.hour - eaten_at.hour)
    score = max(0.0, 1 - hour_diff / tuning.time_window_hours)
    if eaten_at.weekday() == now.weekday():
        score += tuning.same_weekday_bonus
    return score


def _reason(
    avg_time_score: float,
    frequency: int,
    recency_score: float,
    tuning: AnalyticsTuning,
) -> SuggestionReason:
    if avg_time_score > tuning.usual_time_threshold:
        return SuggestionReason.USUAL_TIME
    if frequency >= tuning.frequent_threshold:
        return SuggestionReason.FREQUENT
    if recency_score > tuning.recent_threshold:
        return SuggestionReason.ADDED_RECENTLY
    return SuggestionReason.RECENTLY_ADDED


def _search(
    ranked: list[SmartSuggestion], term: str, tuning: AnalyticsTuning
) -> list[SmartSuggestion]:
    """Filter ranked suggestions by a lowercase term and boost better matches."""
    rescored = []
    for suggestion in ranked:
        name = suggestion.entry.name.lower()
        description = (suggestion.entry.description or "").lower()
        if term not in name and term not in description:
            continue
        boost = (
            suggestion.frequency**tuning.frequency_exponent
            * tuning.search_frequency_factor
        )
        if name == term:
            boost += tuning.exact_match_boost
        if name.startswith(term):
            boost += tuning.prefix_match_boost
        rescored.append(replace(suggestion, score=suggestion.score + boost))
    return sorted(rescored, key=lambda item: item.score, reverse=True)


def _as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment
