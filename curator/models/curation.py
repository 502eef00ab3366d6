"""
Request, insight and result models for one curation call.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .scoring import RecommendationResult


class CurationRequest(BaseModel):
    """What the caller asked for; part of the cache key, not an input to scoring."""

    domain: str = "software_engineering"
    category: str = "foundation"
    difficulty: str = "beginner"
    content_type: str = "all"
    limit: int = 20


class PathAlignmentSummary(BaseModel):
    aligned_count: int = 0
    total_count: int = 0
    alignment_percentage: int = 0


def _quality_bands() -> Dict[str, int]:
    return {"excellent": 0, "good": 0, "fair": 0, "poor": 0}


def _difficulty_bands() -> Dict[str, int]:
    return {"beginner": 0, "intermediate": 0, "advanced": 0, "expert": 0}


class InsightSummary(BaseModel):
    """Read-only distributions over the final result set plus advisory strings."""

    quality_distribution: Dict[str, int] = Field(default_factory=_quality_bands)
    format_distribution: Dict[str, int] = Field(default_factory=dict)
    platform_distribution: Dict[str, int] = Field(default_factory=dict)
    difficulty_distribution: Dict[str, int] = Field(default_factory=_difficulty_bands)
    path_alignment: PathAlignmentSummary = Field(default_factory=PathAlignmentSummary)
    advisories: List[str] = Field(default_factory=list)


class CurationMetadata(BaseModel):
    raw_count: int = 0
    unique_count: int = 0
    quality_filtered_count: int = 0
    final_count: int = 0
    cached: bool = False
    profile_version: str = "1.0"
    curated_at: Optional[str] = None
    adaptation_confidence: float = 0.0


class CurationResult(BaseModel):
    """Final curated recommendations with insights and pipeline counts."""

    results: List[RecommendationResult] = Field(default_factory=list)
    insights: InsightSummary = Field(default_factory=InsightSummary)
    metadata: CurationMetadata = Field(default_factory=CurationMetadata)
