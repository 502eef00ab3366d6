"""Shared utilities for scoring, text matching, and difficulty levels."""

from .levels import content_level, level_distance, user_level
from .scores import clamp_score, days_since, parse_duration_minutes, round_half_up
from .text import count_matches, item_text

__all__ = [
    "clamp_score",
    "content_level",
    "count_matches",
    "days_since",
    "item_text",
    "level_distance",
    "parse_duration_minutes",
    "round_half_up",
    "user_level",
]
