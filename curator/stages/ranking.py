"""
Composite Ranker — combine the three scorer outputs, apply adaptation, and sort.

combined = weight_quality * quality + weight_personalization * personalization
           + weight_path_alignment * path_alignment   (rounded)
adjusted = combined * difficulty multiplier * format multipliers   (rounded, capped at 100)

Sort is by adjusted score, then combined score, then input order.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..models.adaptation import AdaptationDirective
from ..models.config import CurationConfig, DEFAULT_CONFIG
from ..models.content import ContentItem
from ..models.profile import UserProfile
from ..models.scoring import (
    PathAlignmentScore,
    PersonalizationScore,
    QualityAnalysis,
    RecommendationResult,
    recommendation_strength,
)
from ..utils.scores import clamp_score, round_half_up
from .scoring import score_path_alignment, score_personalization, score_quality

logger = logging.getLogger(__name__)


def combined_score(
    quality: float,
    personalization: float,
    path_alignment: float,
    config: CurationConfig = DEFAULT_CONFIG,
) -> int:
    """Weighted sum of the three component scores, rounded half up."""
    return round_half_up(
        quality * config.weight_quality
        + personalization * config.weight_personalization
        + path_alignment * config.weight_path_alignment
    )


def recommendation_reasons(
    item: ContentItem,
    quality: QualityAnalysis,
    personalization: PersonalizationScore,
    path_alignment: PathAlignmentScore,
    profile: UserProfile,
) -> List[str]:
    """Machine-readable reasons for including an item."""
    reasons = []
    if quality.score >= 80:
        reasons.append("high_quality")
    if personalization.score >= 70:
        reasons.append("matches_preferences")
    if path_alignment.score >= 70:
        reasons.append("aligned_with_path")
    if item.rating is not None and item.rating >= 4.5:
        reasons.append("highly_rated")
    if item.cost == "free":
        reasons.append("free_access")
    if item.platform in profile.preferred_platforms:
        reasons.append("preferred_platform")
    return reasons


def score_item(
    item: ContentItem,
    profile: UserProfile,
    config: CurationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> RecommendationResult:
    """
    Run the three scorers for one item.

    A scorer failure never aborts the batch: the item keeps a neutral analysis instead.
    """
    try:
        quality = score_quality(item, profile, config, now)
        personalization = score_personalization(item, profile)
        path_alignment = score_path_alignment(item, profile)
    except Exception:
        logger.warning(
            "[quality_fallback] ITEM_SCORING_FAILED id=%s title=%r", item.id, item.title,
            exc_info=True,
        )
        quality = QualityAnalysis.neutral()
        personalization = PersonalizationScore(score=0.0)
        path_alignment = PathAlignmentScore(score=0.0)

    combined = int(clamp_score(
        combined_score(quality.score, personalization.score, path_alignment.score, config)
    ))
    return RecommendationResult(
        item=item,
        quality=quality,
        personalization=personalization,
        path_alignment=path_alignment,
        combined_score=combined,
        adjusted_score=combined,
        strength=recommendation_strength(combined),
        reasons=recommendation_reasons(item, quality, personalization, path_alignment, profile),
    )


def apply_adaptation(
    result: RecommendationResult,
    directive: AdaptationDirective,
    config: CurationConfig = DEFAULT_CONFIG,
) -> RecommendationResult:
    """Multiply the combined score by the difficulty then format adjustments."""
    item = result.item
    direction = directive.difficulty.direction
    score = float(result.combined_score)
    reasons = list(result.reasons)

    if direction == "decrease" and item.difficulty == "advanced":
        score *= config.decrease_advanced_multiplier
        reasons.append("paced_for_you")
    if direction == "increase" and item.difficulty == "beginner":
        score *= config.increase_beginner_multiplier

    if item.format in directive.formats.boost:
        score *= config.boost_format_multiplier
        reasons.append("preferred_format")
    if item.format in directive.formats.penalty:
        score *= config.penalty_format_multiplier

    adjusted = int(clamp_score(round_half_up(score)))
    return result.model_copy(
        update={
            "adjusted_score": adjusted,
            "strength": recommendation_strength(adjusted),
            "reasons": reasons,
        }
    )


def sort_ranked(results: List[RecommendationResult]) -> List[RecommendationResult]:
    """Adjusted score desc, then combined score desc; equal keys keep input order."""
    return sorted(results, key=lambda r: (-r.adjusted_score, -r.combined_score))


def rank_candidates(
    items: List[ContentItem],
    profile: UserProfile,
    directive: Optional[AdaptationDirective] = None,
    config: CurationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[RecommendationResult]:
    """
    Score, optionally floor by quality, adapt, and sort all candidates.

    Ranks are assigned later by the diversity selector.
    """
    directive = directive or AdaptationDirective()
    scored = [score_item(item, profile, config, now) for item in items]

    if config.quality_floor > 0:
        kept = [r for r in scored if r.quality.score >= config.quality_floor]
        logger.debug(
            "[ranking] QUALITY_FLOOR floor=%s kept=%s dropped=%s",
            config.quality_floor, len(kept), len(scored) - len(kept),
        )
        scored = kept

    adapted = [apply_adaptation(r, directive, config) for r in scored]
    return sort_ranked(adapted)
