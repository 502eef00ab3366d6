"""
Difficulty levels — the four-point ordinal scale shared by every stage.
"""

from typing import Optional

LEVELS = {
    "entry": 1,
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
    "expert": 4,
}

DEFAULT_USER_LEVEL = 1
DEFAULT_CONTENT_LEVEL = 2


def user_level(label: Optional[str]) -> int:
    """Ordinal for a user's experience level (unknown → beginner)."""
    return LEVELS.get((label or "").strip().lower(), DEFAULT_USER_LEVEL)


def content_level(label: Optional[str]) -> int:
    """Ordinal for a content difficulty (unknown → intermediate)."""
    return LEVELS.get((label or "").strip().lower(), DEFAULT_CONTENT_LEVEL)


def level_distance(user_label: Optional[str], content_label: Optional[str]) -> int:
    """Absolute ordinal distance between a user level and a content difficulty."""
    return abs(user_level(user_label) - content_level(content_label))
