"""
Learning Content Curator — multi-stage scoring and diverse top-N selection

Single entry point for the curator package:
- models/: ContentItem, UserProfile, LearningHistoryEntry, CurationConfig, results
- stages/: candidate_pool, scoring (quality, personalization, path alignment),
  adaptation (patterns, resolver), ranking, diversity, insights, orchestrator
- cache: CurationCache protocol and in-memory TTLCache
"""

from .cache import CurationCache, TTLCache, build_cache_key
from .models import (
    DEFAULT_CONFIG,
    AdaptationDirective,
    ContentItem,
    CurationConfig,
    CurationRequest,
    CurationResult,
    InsightSummary,
    LearningHistoryEntry,
    PatternSummary,
    RecommendationResult,
    UserProfile,
    resolve_config,
)
from .stages import (
    analyze_patterns,
    curate,
    gather_candidates,
    rank_candidates,
    resolve_adaptation,
    score_path_alignment,
    score_personalization,
    score_quality,
    select_diverse,
    suggest_profile_updates,
    summarize_insights,
)

__version__ = "1.0.0"

__all__ = [
    "AdaptationDirective",
    "ContentItem",
    "CurationCache",
    "CurationConfig",
    "CurationRequest",
    "CurationResult",
    "DEFAULT_CONFIG",
    "InsightSummary",
    "LearningHistoryEntry",
    "PatternSummary",
    "RecommendationResult",
    "TTLCache",
    "UserProfile",
    "analyze_patterns",
    "build_cache_key",
    "curate",
    "gather_candidates",
    "rank_candidates",
    "resolve_adaptation",
    "resolve_config",
    "score_path_alignment",
    "score_personalization",
    "score_quality",
    "select_diverse",
    "suggest_profile_updates",
    "summarize_insights",
]
