"""
Pipeline orchestrator — candidate pool, scoring, adaptation, ranking, diversity, insights.

The main entry point is curate, which runs every stage for one request and returns the
CurationResult (results, insights, metadata). The pipeline is synchronous and pure apart
from the optional cache collaborator.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from ..cache import CurationCache, build_cache_key
from ..models.adaptation import AdaptationDirective
from ..models.config import CurationConfig, resolve_config
from ..models.curation import CurationMetadata, CurationRequest, CurationResult
from ..models.history import LearningHistoryEntry, ensure_history
from ..models.profile import UserProfile
from ..models.scoring import RecommendationResult
from .adaptation import analyze_patterns, resolve_adaptation
from .candidate_pool import RawItems, build_candidate_pool
from .diversity import select_diverse
from .insights import summarize_insights
from .ranking import rank_candidates

logger = logging.getLogger(__name__)


def _directive_for(
    history: List[LearningHistoryEntry],
    profile: UserProfile,
    config: CurationConfig,
) -> AdaptationDirective:
    """Pattern analysis then adaptation resolution for this request's history snapshot."""
    summary = analyze_patterns(history)
    return resolve_adaptation(summary, profile, config)


def _mark_cached(result: CurationResult) -> CurationResult:
    return result.model_copy(
        update={"metadata": result.metadata.model_copy(update={"cached": True})}
    )


def curate(
    profile: Union[UserProfile, Dict[str, Any]],
    history: List[Union[LearningHistoryEntry, Dict[str, Any]]],
    raw_items: RawItems,
    limit: int = 20,
    config: Optional[CurationConfig] = None,
    request: Optional[CurationRequest] = None,
    cache: Optional[CurationCache] = None,
    reference_time: Optional[datetime] = None,
) -> CurationResult:
    """
    Curate up to `limit` recommendations for one user.

    raw_items may be a flat list (already in source-priority order) or a mapping of
    source label → items, merged in config.source_priority order.

    Returns:
        CurationResult with ranked results (rank 1..k), insights and pipeline counts.
        Empty raw_items yields no results and a zeroed insight summary.
    """
    # Resolve config and normalize inputs (server passes dicts)
    config = resolve_config(config)
    profile = profile if isinstance(profile, UserProfile) else UserProfile.model_validate(profile)
    history_typed = ensure_history(history)
    request = request or CurationRequest(limit=limit)
    if request.limit != limit:
        request = request.model_copy(update={"limit": limit})
    now = reference_time or datetime.now(timezone.utc)

    # Candidate pool: merge sources, dedupe by URL
    raw_count = (
        sum(len(batch or []) for batch in raw_items.values())
        if isinstance(raw_items, Mapping)
        else len(raw_items or [])
    )
    candidates = build_candidate_pool(raw_items, config)

    # Cache short-circuit, keyed on the typed inputs
    cache_key = (
        build_cache_key(profile, request, candidates, history_typed) if cache is not None else None
    )
    if cache_key is not None:
        cached = cache.get(cache_key)
        if cached is not None:
            logger.info("[curate] CACHE_HIT key=%s", cache_key)
            return _mark_cached(cached)

    # Adaptation directive from history
    directive = _directive_for(history_typed, profile, config)

    # Score, adapt, sort
    ranked: List[RecommendationResult] = rank_candidates(candidates, profile, directive, config, now)

    # Diversity selection and insights
    final = select_diverse(ranked, limit, config)
    insights = summarize_insights(final, profile, config)

    result = CurationResult(
        results=final,
        insights=insights,
        metadata=CurationMetadata(
            raw_count=raw_count,
            unique_count=len(candidates),
            quality_filtered_count=len(ranked),
            final_count=len(final),
            profile_version=profile.version,
            curated_at=now.isoformat(),
            adaptation_confidence=directive.confidence,
        ),
    )
    logger.info(
        "[curate] DONE raw=%s unique=%s ranked=%s final=%s difficulty_shift=%s confidence=%.2f",
        raw_count, len(candidates), len(ranked), len(final), directive.difficulty.direction,
        directive.confidence,
    )

    if cache_key is not None:
        cache.set(cache_key, result)
    return result
