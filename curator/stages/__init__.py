"""Pipeline stages: candidate pool, scoring, adaptation, ranking, diversity, insights, orchestrator."""

from .adaptation import analyze_patterns, resolve_adaptation
from .candidate_pool import build_candidate_pool, dedupe_items, gather_candidates
from .diversity import select_diverse
from .insights import suggest_profile_updates, summarize_insights
from .orchestrator import curate
from .ranking import rank_candidates
from .scoring import score_path_alignment, score_personalization, score_quality

__all__ = [
    "analyze_patterns",
    "build_candidate_pool",
    "curate",
    "dedupe_items",
    "gather_candidates",
    "rank_candidates",
    "resolve_adaptation",
    "score_path_alignment",
    "score_personalization",
    "score_quality",
    "select_diverse",
    "suggest_profile_updates",
    "summarize_insights",
]
