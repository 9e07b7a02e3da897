"""Errors raised by the analytics services."""


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class TrendDataUnavailableError(AnalyticsError):
    """Food entries could not be fetched, so nothing can be aggregated."""


class InvalidDateRangeError(AnalyticsError, ValueError):
    """The requested range ends before it starts."""
