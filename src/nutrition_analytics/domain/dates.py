"""Calendar helpers for date bucketing and labels."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta


def days_in_range(start: date, end: date) -> list[date]:
    """Return every calendar day from start to end, both inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def day_label(day: date) -> str:
    """Label used for trend buckets, e.g. ``Jun 01``."""
    return day.strftime("%b %d")


def short_day_label(moment: datetime | date) -> str:
    """Label used for last-eaten hints, e.g. ``Jun 3``."""
    return f"{moment.strftime('%b')} {moment.day}"


def lookback_start(now: datetime, days: int) -> date:
    """Return the calendar day ``days`` before ``now``."""
    return (now - timedelta(days=days)).date()


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp from the store; naive values are taken as UTC."""
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str) and raw:
        try:
            parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_date(raw: object) -> date | None:
    """Parse a ``YYYY-MM-DD`` value (or the date part of a timestamp)."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class DateRange:
    """Calendar range ``[start, end]``; a missing end leaves it open."""

    start: date
    end: date | None = None

    def days(self) -> list[date]:
        """Return every day in the range in ascending order."""
        if self.end is None:
            raise ValueError("Cannot enumerate the days of an open-ended range")
        return days_in_range(self.start, self.end)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date) or isinstance(day, datetime):
            return False
        if day < self.start:
            return False
        return self.end is None or day <= self.end
