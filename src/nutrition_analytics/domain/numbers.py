"""Numeric helpers shared by the analytics engine."""

import math


def to_float(value: object, default: float = 0.0) -> float:
    """Coerce a stored numeric value, returning the default when unparseable."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(result):
        return default
    return result


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return math.floor(value + 0.5)
