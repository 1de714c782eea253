"""Timestamp helpers for ASS event lines."""

import math
from decimal import ROUND_HALF_UP, Decimal


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return float(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_timestamp(seconds: float) -> str:
    """Convert seconds to an event timestamp (HH:MM:SS.f).

    Seconds are rounded to two decimals and always carry at least one
    fractional digit.

    Args:
        seconds: Time in seconds

    Returns:
        Timestamp string, e.g. ``01:01:01.5``
    """
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = _round_half_away((seconds % 60) * 100) / 100
    secs_text = repr(secs)
    if secs < 10:
        secs_text = f"0{secs_text}"
    return f"{hours:02d}:{minutes:02d}:{secs_text}"


def vpos_to_timestamp(vpos: float, offset: float = 0.0) -> str:
    """Convert a vpos (centiseconds) plus an offset in seconds to a timestamp.

    Args:
        vpos: Comment timestamp in hundredths of a second
        offset: Seconds added after conversion

    Returns:
        Timestamp string
    """
    return format_timestamp(vpos / 100.0 + offset)
