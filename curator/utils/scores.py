"""
Score helpers — rounding, clamping, and time/duration parsing used by every stage.
"""

import math
import re
from datetime import datetime, timezone
from typing import Optional, Union

_FIRST_NUMBER = re.compile(r"\d+")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))


def days_since(date_str: Optional[str], now: Optional[datetime] = None) -> Optional[float]:
    """
    Days between an ISO date string and `now` (UTC).

    Returns None when the date is missing or unparseable so callers can keep their
    neutral default.
    """
    if not date_str:
        return None
    try:
        dt = datetime.fromisoformat(str(date_str).replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - dt).total_seconds() / 86400.0


def parse_duration_minutes(duration: Union[str, int, float, None]) -> Optional[int]:
    """
    Parse a loose duration ("45 min", "3 hours", "2 days", 90) into minutes.

    Takes the first integer in the text; "hour" multiplies by 60, "day" by 1440.
    Returns None when no positive number is found.
    """
    if duration is None or isinstance(duration, bool):
        return None
    if isinstance(duration, (int, float)):
        minutes = int(duration)
        return minutes if minutes > 0 else None
    text = str(duration).lower()
    match = _FIRST_NUMBER.search(text)
    if not match:
        return None
    minutes = int(match.group(0))
    if "hour" in text:
        minutes *= 60
    elif "day" in text:
        minutes *= 60 * 24
    return minutes if minutes > 0 else None
