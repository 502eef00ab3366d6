"""
Scoring models — per-item analyses and the emitted recommendation.

Contains:
- QualityAnalysis, PersonalizationScore, PathAlignmentScore: one scorer output each
- RecommendationResult: an item with its component, combined and adjusted scores
- quality_grade, recommendation_strength: score → label helpers
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from .content import ContentItem


def quality_grade(score: float) -> str:
    """Letter grade for a quality score."""
    if score >= 90:
        return "A+"
    if score >= 80:
        return "A"
    if score >= 70:
        return "B+"
    if score >= 60:
        return "B"
    if score >= 50:
        return "C+"
    if score >= 40:
        return "C"
    return "D"


def recommendation_strength(score: float) -> str:
    """Coarse strength label for an adjusted score."""
    if score >= 85:
        return "very_strong"
    if score >= 70:
        return "strong"
    if score >= 50:
        return "moderate"
    return "weak"


class QualityAnalysis(BaseModel):
    """Source-independent quality of one item, with per-factor breakdown."""

    score: int
    grade: str
    breakdown: Dict[str, float] = Field(default_factory=dict)
    hints: List[str] = Field(default_factory=list)

    @classmethod
    def neutral(cls) -> "QualityAnalysis":
        """Stand-in analysis for an item whose scoring failed."""
        return cls(score=50, grade="C", breakdown={}, hints=[])


class PersonalizationScore(BaseModel):
    """Fit of one item to the user's stated preferences."""

    score: float
    breakdown: Dict[str, float] = Field(default_factory=dict)


class PathAlignmentScore(BaseModel):
    """Fit of one item to the user's active roadmaps and goals."""

    score: float
    breakdown: Dict[str, float] = Field(default_factory=dict)


class RecommendationResult(BaseModel):
    """An item with all its scoring components, as returned to the caller."""

    item: ContentItem
    quality: QualityAnalysis
    personalization: PersonalizationScore
    path_alignment: PathAlignmentScore
    combined_score: int
    adjusted_score: int
    rank: int = 0
    strength: str = "weak"
    reasons: List[str] = Field(default_factory=list)
    # True when the item was added past the diversity caps to fill the limit.
    backfilled: bool = False
