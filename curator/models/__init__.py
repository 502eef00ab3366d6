"""Data models for the curation pipeline."""

from .adaptation import (
    AdaptationDirective,
    DifficultyAdjustment,
    FocusAreas,
    FormatAdjustment,
    PacingAdjustment,
    PatternSummary,
)
from .config import DEFAULT_CONFIG, CurationConfig, resolve_config
from .content import ContentItem, ensure_items, make_item_id, normalize_url
from .curation import (
    CurationMetadata,
    CurationRequest,
    CurationResult,
    InsightSummary,
    PathAlignmentSummary,
)
from .history import LearningHistoryEntry, ensure_history
from .profile import Roadmap, Skill, UserProfile
from .scoring import (
    PathAlignmentScore,
    PersonalizationScore,
    QualityAnalysis,
    RecommendationResult,
    quality_grade,
    recommendation_strength,
)

__all__ = [
    "AdaptationDirective",
    "ContentItem",
    "CurationConfig",
    "CurationMetadata",
    "CurationRequest",
    "CurationResult",
    "DEFAULT_CONFIG",
    "DifficultyAdjustment",
    "FocusAreas",
    "FormatAdjustment",
    "InsightSummary",
    "LearningHistoryEntry",
    "PacingAdjustment",
    "PathAlignmentScore",
    "PathAlignmentSummary",
    "PatternSummary",
    "PersonalizationScore",
    "QualityAnalysis",
    "RecommendationResult",
    "Roadmap",
    "Skill",
    "UserProfile",
    "ensure_history",
    "ensure_items",
    "make_item_id",
    "normalize_url",
    "quality_grade",
    "recommendation_strength",
    "resolve_config",
]
