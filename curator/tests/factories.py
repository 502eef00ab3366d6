"""Builders for curator test data."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from curator import ContentItem, LearningHistoryEntry
from curator.models import PathAlignmentScore, PersonalizationScore, QualityAnalysis, RecommendationResult

REFERENCE_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def days_ago(days: int) -> str:
    return (REFERENCE_TIME - timedelta(days=days)).isoformat()


def make_item(**overrides) -> ContentItem:
    slug = str(overrides.get("title", "resource")).replace(" ", "-").lower()
    data = {
        "title": "Learning resource",
        "url": f"https://example.com/{slug}",
        "platform": "unknown",
    }
    data.update(overrides)
    return ContentItem.model_validate(data)


def make_history(
    statuses: List[str],
    difficulties: Optional[List[Optional[str]]] = None,
    **common,
) -> List[LearningHistoryEntry]:
    difficulties = difficulties or [None] * len(statuses)
    return [
        LearningHistoryEntry.model_validate({"status": s, "difficulty": d, **common})
        for s, d in zip(statuses, difficulties)
    ]


def make_result(
    name: str,
    adjusted: int,
    combined: Optional[int] = None,
    format: str = "article",
    platform: str = "unknown",
    **item_fields,
) -> RecommendationResult:
    combined = adjusted if combined is None else combined
    return RecommendationResult(
        item=make_item(title=name, format=format, platform=platform, **item_fields),
        quality=QualityAnalysis(score=combined, grade="C"),
        personalization=PersonalizationScore(score=0.0),
        path_alignment=PathAlignmentScore(score=0.0),
        combined_score=combined,
        adjusted_score=adjusted,
    )
