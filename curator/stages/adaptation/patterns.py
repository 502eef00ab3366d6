"""
Pattern Analyzer — mine a learning history into a compact behavioral summary.

Completion rate, mean time spent, difficulty progression, engagement band,
most frequent formats, and the skills the user struggles with or is strong in.
"""

import logging
from collections import Counter
from typing import Iterable, List

import numpy as np

from ...models.adaptation import PatternSummary
from ...models.history import LearningHistoryEntry
from ...utils.levels import content_level

logger = logging.getLogger(__name__)

TOP_FORMATS = 3
TOP_AREAS = 3


def _most_frequent(values: Iterable[str], n: int) -> List[str]:
    """Top-n values by frequency; ties keep first-seen order."""
    return [value for value, _ in Counter(v for v in values if v).most_common(n)]


def classify_progression(history: List[LearningHistoryEntry]) -> str:
    """
    "struggling" when more than half the entries are incomplete; otherwise "progressive"
    when the declared difficulties never step down, else "stable".

    Fewer than two entries with a declared difficulty cannot show a progression and are "stable".
    """
    incomplete = sum(1 for entry in history if entry.incomplete)
    if incomplete > len(history) * 0.5:
        return "struggling"
    levels = [content_level(entry.difficulty) for entry in history if entry.difficulty]
    if len(levels) < 2:
        return "stable"
    if all(later >= earlier for earlier, later in zip(levels, levels[1:])):
        return "progressive"
    return "stable"


def engagement_band(completion_rate: float) -> str:
    if completion_rate >= 0.8:
        return "high"
    if completion_rate >= 0.5:
        return "medium"
    return "low"


def analyze_patterns(history: List[LearningHistoryEntry]) -> PatternSummary:
    """Summarize a history snapshot; empty history yields neutral defaults."""
    if not history:
        return PatternSummary()

    completed = [entry for entry in history if entry.completed]
    incomplete = [entry for entry in history if entry.incomplete]
    completion_rate = len(completed) / len(history)
    average_time = float(np.mean([entry.time_spent for entry in history]))

    summary = PatternSummary(
        completion_rate=completion_rate,
        average_time_spent=average_time,
        difficulty_progression=classify_progression(history),
        engagement_level=engagement_band(completion_rate),
        preferred_formats=_most_frequent((e.content_format for e in history), TOP_FORMATS),
        struggling_areas=_most_frequent((s for e in incomplete for s in e.skills), TOP_AREAS),
        strong_areas=_most_frequent((s for e in completed for s in e.skills), TOP_AREAS),
        entry_count=len(history),
    )
    logger.debug(
        "[patterns] SUMMARY entries=%s completion=%.2f progression=%s engagement=%s",
        summary.entry_count,
        summary.completion_rate,
        summary.difficulty_progression,
        summary.engagement_level,
    )
    return summary
